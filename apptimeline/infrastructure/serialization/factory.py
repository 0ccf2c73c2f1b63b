"""Codec factory for the supported wire formats"""

from typing import ClassVar

from apptimeline.application.interfaces.services import IEntityCodec
from apptimeline.infrastructure.config.settings import get_settings
from apptimeline.infrastructure.exceptions import \
    UnsupportedWireFormatException
from apptimeline.infrastructure.serialization.json_codec import \
    JsonEntityCodec
from apptimeline.infrastructure.serialization.xml_codec import XmlEntityCodec
from apptimeline.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class EntityCodecFactory:
    """Factory for creating wire codec instances"""

    _codecs: ClassVar[dict[str, type[IEntityCodec]]] = {
        "json": JsonEntityCodec,
        "xml": XmlEntityCodec,
    }

    @classmethod
    def create_codec(cls, wire_format: str | None = None) -> IEntityCodec:
        """
        Create codec instance for a wire format.

        Args:
            wire_format: "json", "xml" or a registered custom format.
                Defaults to the configured wire_format.

        Returns:
            Codec instance

        Raises:
            UnsupportedWireFormatException: If no codec is registered for the format
        """
        wire_format = (wire_format or get_settings().wire_format).lower()
        codec_class = cls._codecs.get(wire_format)

        if not codec_class:
            raise UnsupportedWireFormatException(wire_format, cls.list_supported_formats())

        logger.debug("Creating %s for %s", codec_class.__name__, wire_format)
        return codec_class()

    @classmethod
    def register_codec(cls, wire_format: str, codec_class: type[IEntityCodec]) -> None:
        """
        Register a custom wire codec.

        Args:
            wire_format: Format identifier (e.g., 'yaml')
            codec_class: Codec class implementing IEntityCodec
        """
        cls._codecs[wire_format.lower()] = codec_class
        logger.info("Registered custom codec: %s", wire_format)

    @classmethod
    def list_supported_formats(cls) -> list[str]:
        """Get list of supported wire formats"""
        return list(cls._codecs.keys())
