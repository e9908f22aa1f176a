"""Display names for location records."""

from location_api.core.config import settings
from location_api.core.logging import get_logger
from location_api.models.location import LocationRecord
from location_api.services.protocols import NameStore

logger = get_logger(__name__)


class NameResolver:
    """Resolve a record's name in a requested language.

    Falls back to the record's canonical name when no language is requested,
    the language is the canonical one, the store has no name, or the store
    fails. Never raises.
    """

    def __init__(
        self,
        name_store: NameStore | None = None,
        canonical_language: str | None = None,
    ):
        self.name_store = name_store
        self.canonical_language = (
            canonical_language or settings.CANONICAL_LANGUAGE
        ).lower()

    def resolve(
        self,
        record: LocationRecord,
        iso_language: str | None = None,
        language_tag: str | None = None,
    ) -> str:
        """Return the display name of a record.

        Args:
            record: Location record to name
            iso_language: Requested ISO 639 language, None for the canonical name
            language_tag: Optional preferred tag such as "de-CH"

        Returns:
            str: Localized name or ``record.name``
        """
        if not iso_language or self.name_store is None:
            return record.name
        if iso_language.lower() == self.canonical_language:
            return record.name

        try:
            name = self.name_store.resolve_alternate_name(
                record, iso_language, language_tag
            )
        except Exception as e:
            logger.warning(
                "alternate_name_lookup_failed",
                location_id=record.id,
                iso_language=iso_language,
                error=str(e),
            )
            return record.name

        return name or record.name
