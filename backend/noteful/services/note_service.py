"""
Noteful Backend — Note Service
================================

Data access for the `notes` table.

`modified` is maintained by the model: its default fills it on insert and
its onupdate hook refreshes it on every update() issued here.
"""

from noteful.models.note import Note
from noteful.services.base import ResourceService


class NoteService(ResourceService[Note]):
    model = Note
