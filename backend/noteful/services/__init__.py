# Services package init
"""
Noteful Backend — Services Layer
==================================

What:  Data-access layer sitting between routes (HTTP) and the store.
Why:   Routes handle HTTP; services issue queries. Services can be tested with
       a mock session and no HTTP at all.

Service Inventory:
    - ResourceService (generic): list_all, insert, get_by_id, delete, update
    - FolderService: folders table
    - NoteService: notes table

Each service receives its AsyncSession at construction; there is no shared
module-level session or engine.
"""
