"""
Noteful Backend — Folder Service
==================================

Data access for the `folders` table. All operations come from
ResourceService; this module only binds the model.
"""

from noteful.models.folder import Folder
from noteful.services.base import ResourceService


class FolderService(ResourceService[Folder]):
    model = Folder
