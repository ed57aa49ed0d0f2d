# Services package init
"""
LinkHub Backend — Services Layer
==================================

What:  One service per collection, each a thin CollectionService subclass.

Service Inventory:
    - CollectionService: find/insert/update/delete plus the shared
      failure boundary (driver error → StorageError, None → NotFoundError)
    - UserService, ConnectionService, PostService, MessageService

Services take the DocumentStore as an argument on every call and hold no
connection state, so a single module-level instance of each is shared.
"""
