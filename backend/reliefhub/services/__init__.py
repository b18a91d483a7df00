# Services package init
"""
ReliefHub Backend — Services Layer
====================================

What:  Logic sitting between routes (HTTP) and the document store.

Service Inventory:
    - AuthService (credential_service): register / authenticate with bcrypt
    - TokenIssuer (token_service): signed JWT issuance and verification
    - ResourceService / SupplyService (resource_service): per-collection CRUD
    - serializers: ObjectId and write-result conversion to JSON-safe dicts
"""
