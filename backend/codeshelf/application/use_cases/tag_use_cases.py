"""Use cases for language and topic tags."""

import logging
from typing import List, Optional

from codeshelf.domain.models.records import Tag, TagType
from codeshelf.domain.repositories.interfaces import TagRepository
from codeshelf.shared.exceptions import ConflictError, NotFoundError, ValidationError
from codeshelf.shared.helpers import create_slug, generate_id

logger = logging.getLogger(__name__)


class TagUseCases:
    def __init__(self, repository: TagRepository):
        self.repository = repository

    async def list_tags(self, tag_type: Optional[TagType] = None) -> List[Tag]:
        if tag_type is None:
            return await self.repository.list_all()
        return await self.repository.list_by_type(tag_type)

    async def get_tag_by_slug(self, slug: str) -> Tag:
        tag = await self.repository.get_by_slug(slug)
        if tag is None:
            raise NotFoundError("Tag not found")
        return tag

    async def create_tag(self, name: str, tag_type: TagType) -> Tag:
        slug = create_slug(name)
        if not slug:
            raise ValidationError("Tag name must contain letters or numbers")
        if await self.repository.get_by_slug(slug):
            raise ConflictError(f"Tag '{slug}' already exists")

        tag = Tag(id=generate_id(), name=name.strip(), slug=slug, type=tag_type)
        await self.repository.add(tag)
        logger.info(f"Created {tag_type.value} tag {slug}")
        return tag
