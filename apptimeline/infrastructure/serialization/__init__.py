"""Wire codecs for timeline documents."""

from apptimeline.infrastructure.serialization.factory import \
    EntityCodecFactory
from apptimeline.infrastructure.serialization.json_codec import \
    JsonEntityCodec
from apptimeline.infrastructure.serialization.xml_codec import XmlEntityCodec

__all__ = ["EntityCodecFactory", "JsonEntityCodec", "XmlEntityCodec"]
