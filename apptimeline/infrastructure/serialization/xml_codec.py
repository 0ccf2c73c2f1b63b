"""
XML wire codec.

Layout of an entity document:

    <entity>
      <entitytype>APPLICATION</entitytype>
      <entity>application_1</entity>
      <starttime>1385998245000</starttime>
      <events>
        <event>
          <timestamp>1385998245000</timestamp>
          <eventtype>APP_SUBMITTED</eventtype>
          <eventinfo><entry key="queue"><value type="string">default</value></entry></eventinfo>
        </event>
      </events>
      <relatedentities>
        <entry key="APP_ATTEMPT"><value type="string">appattempt_1</value></entry>
      </relatedentities>
      <primaryfilters>...</primaryfilters>
      <otherinfo>...</otherinfo>
    </entity>

Every value carries its type so integers, floats, booleans, nulls and nested
lists/maps come back exactly as they went in.

XML cannot carry every string: the parser folds carriage returns into line
feeds, and most control characters are not allowed at all. Such strings are
written as base64 of their UTF-8 bytes and flagged with `encoding="base64"`
(`keyencoding="base64"` for map keys):

    <value type="string" encoding="base64">bGluZTENCmxpbmUy</value>
"""

import base64
import binascii
import re
import xml.etree.ElementTree as ET
from collections.abc import Mapping

from apptimeline.domain.entities import (TimelineEntities, TimelineEntity,
                                         TimelineEvent, TimelinePutError,
                                         TimelinePutErrors)
from apptimeline.domain.enums import PutErrorCode
from apptimeline.domain.value_objects.core import EntityValue
from apptimeline.infrastructure.config.settings import get_settings
from apptimeline.infrastructure.exceptions import EntitySerializationException
from apptimeline.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

# Characters outside these ranges do not survive element text or attributes.
# Attribute values get \t \n \r escaped by ElementTree, element text does not.
_UNSAFE_TEXT = re.compile("[^\t\n\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")
_UNSAFE_ATTRIB = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def _to_base64(text: str) -> str:
    # surrogatepass keeps lone surrogates, which plain UTF-8 refuses
    return base64.b64encode(text.encode("utf-8", "surrogatepass")).decode("ascii")


class XmlEntityCodec:
    """Encode and decode timeline documents as XML"""

    wire_format = "xml"
    content_type = "application/xml"

    def __init__(self, pretty_print: bool | None = None):
        if pretty_print is None:
            pretty_print = get_settings().xml_pretty_print
        self.pretty_print = pretty_print

    # Entities

    def encode_entity(self, entity: TimelineEntity) -> str:
        logger.debug("Encoding entity %s as XML", entity.identifier)
        return self._to_string(self._build_entity(entity))

    def decode_entity(self, document: str | bytes) -> TimelineEntity:
        root = self._parse(document, "entity")
        return self._read_entity(root)

    def encode_entities(self, entities: TimelineEntities) -> str:
        logger.debug("Encoding %d entities as XML", len(entities))
        root = ET.Element("entities")
        for entity in entities:
            root.append(self._build_entity(entity))
        return self._to_string(root)

    def decode_entities(self, document: str | bytes) -> TimelineEntities:
        root = self._parse(document, "entities")
        return TimelineEntities(self._read_entity(node) for node in root.findall("entity"))

    # Put errors

    def encode_put_errors(self, put_errors: TimelinePutErrors) -> str:
        root = ET.Element("errors")
        for error in put_errors.errors:
            node = ET.SubElement(root, "error")
            self._add_text(node, "entity", error.entity_id)
            self._add_text(node, "entitytype", error.entity_type)
            self._add_text(node, "errorcode", str(int(error.error_code)))
        return self._to_string(root)

    def decode_put_errors(self, document: str | bytes) -> TimelinePutErrors:
        root = self._parse(document, "errors")
        put_errors = TimelinePutErrors()
        for node in root.findall("error"):
            code = self._get_text(node, "errorcode")
            try:
                error_code = PutErrorCode(int(code))
            except (TypeError, ValueError) as exc:
                raise EntitySerializationException(
                    self.wire_format, f"invalid errorcode {code!r}"
                ) from exc
            put_errors.add_error(
                TimelinePutError(
                    entity_id=self._get_text(node, "entity"),
                    entity_type=self._get_text(node, "entitytype"),
                    error_code=error_code,
                )
            )
        return put_errors

    # Building

    def _build_entity(self, entity: TimelineEntity) -> ET.Element:
        root = ET.Element("entity")
        self._add_text(root, "entitytype", entity.entity_type)
        self._add_text(root, "entity", entity.entity_id)
        self._add_text(root, "starttime", str(entity.start_time))

        events = ET.SubElement(root, "events")
        for event in entity.events:
            node = ET.SubElement(events, "event")
            self._add_text(node, "timestamp", str(event.timestamp))
            self._add_text(node, "eventtype", event.event_type)
            self._add_map(ET.SubElement(node, "eventinfo"), event.event_info)

        related = ET.SubElement(root, "relatedentities")
        for entity_type, entity_ids in entity.related_entities.items():
            entry = ET.SubElement(related, "entry")
            self._set_key(entry, entity_type)
            for entity_id in entity_ids:
                self._add_value(entry, entity_id)

        self._add_map(ET.SubElement(root, "primaryfilters"), entity.primary_filters)
        self._add_map(ET.SubElement(root, "otherinfo"), entity.other_info)
        return root

    def _add_text(self, parent: ET.Element, tag: str, text: str | None) -> None:
        # Absent element means None; an empty element means ""
        if text is not None:
            self._set_text(ET.SubElement(parent, tag), text)

    @staticmethod
    def _set_text(node: ET.Element, text: str) -> None:
        if _UNSAFE_TEXT.search(text):
            node.set("encoding", "base64")
            text = _to_base64(text)
        node.text = text

    @staticmethod
    def _set_key(entry: ET.Element, key: str) -> None:
        if _UNSAFE_ATTRIB.search(key):
            entry.set("keyencoding", "base64")
            key = _to_base64(key)
        entry.set("key", key)

    def _add_map(self, parent: ET.Element, values: Mapping[str, EntityValue]) -> None:
        for key, value in values.items():
            if not isinstance(key, str):
                raise EntitySerializationException(
                    self.wire_format, f"map keys must be strings, got {type(key).__name__}"
                )
            entry = ET.SubElement(parent, "entry")
            self._set_key(entry, key)
            self._add_value(entry, value)

    def _add_value(self, parent: ET.Element, value: EntityValue) -> None:
        node = ET.SubElement(parent, "value")
        # bool before int: bool is an int subclass
        if value is None:
            node.set("type", "null")
        elif isinstance(value, bool):
            node.set("type", "boolean")
            node.text = "true" if value else "false"
        elif isinstance(value, int):
            node.set("type", "integer")
            node.text = str(value)
        elif isinstance(value, float):
            node.set("type", "float")
            node.text = repr(value)
        elif isinstance(value, str):
            node.set("type", "string")
            self._set_text(node, value)
        elif isinstance(value, (list, tuple)):
            node.set("type", "list")
            for item in value:
                self._add_value(node, item)
        elif isinstance(value, dict):
            node.set("type", "map")
            self._add_map(node, value)
        else:
            raise EntitySerializationException(
                self.wire_format, f"unsupported value type {type(value).__name__}"
            )

    def _to_string(self, root: ET.Element) -> str:
        if self.pretty_print:
            ET.indent(root)
        return ET.tostring(root, encoding="unicode")

    # Reading

    def _parse(self, document: str | bytes, root_tag: str) -> ET.Element:
        try:
            root = ET.fromstring(document)
        except ET.ParseError as exc:
            raise EntitySerializationException(self.wire_format, str(exc)) from exc
        if root.tag != root_tag:
            raise EntitySerializationException(
                self.wire_format, f"expected <{root_tag}> root element, got <{root.tag}>"
            )
        return root

    def _read_entity(self, root: ET.Element) -> TimelineEntity:
        entity = TimelineEntity(
            self._get_text(root, "entitytype"),
            self._get_text(root, "entity"),
            self._get_int(root, "starttime"),
        )

        for node in root.findall("events/event"):
            entity.add_event(
                TimelineEvent(
                    timestamp=self._get_int(node, "timestamp"),
                    event_type=self._get_text(node, "eventtype"),
                    event_info=self._read_map(node.find("eventinfo")),
                )
            )

        related = root.find("relatedentities")
        if related is not None:
            # Bulk set keeps entries with no ids, matching what was encoded
            entity.related_entities = {
                self._get_key(entry): [self._read_value(value) for value in entry.findall("value")]
                for entry in related.findall("entry")
            }

        entity.primary_filters = self._read_map(root.find("primaryfilters"))
        entity.other_info = self._read_map(root.find("otherinfo"))
        return entity

    def _read_map(self, parent: ET.Element | None) -> dict[str, EntityValue]:
        if parent is None:
            return {}
        values: dict[str, EntityValue] = {}
        for entry in parent.findall("entry"):
            value = entry.find("value")
            if value is None:
                raise EntitySerializationException(
                    self.wire_format, f"entry {self._get_key(entry)!r} has no value"
                )
            values[self._get_key(entry)] = self._read_value(value)
        return values

    def _read_value(self, node: ET.Element) -> EntityValue:
        value_type = node.get("type", "string")
        text = node.text or ""
        try:
            if value_type == "null":
                return None
            if value_type == "boolean":
                if text not in ("true", "false"):
                    raise ValueError(f"invalid boolean {text!r}")
                return text == "true"
            if value_type == "integer":
                return int(text)
            if value_type == "float":
                return float(text)
            if value_type == "string":
                return self._text_of(node)
            if value_type == "list":
                return [self._read_value(item) for item in node.findall("value")]
            if value_type == "map":
                return self._read_map(node)
        except ValueError as exc:
            raise EntitySerializationException(self.wire_format, str(exc)) from exc
        raise EntitySerializationException(self.wire_format, f"unknown value type {value_type!r}")

    def _get_key(self, entry: ET.Element) -> str:
        key = entry.get("key")
        if key is None:
            raise EntitySerializationException(self.wire_format, "entry without key attribute")
        return self._decode(key, entry.get("keyencoding"))

    def _get_text(self, parent: ET.Element, tag: str) -> str | None:
        node = parent.find(tag)
        if node is None:
            return None
        return self._text_of(node)

    def _text_of(self, node: ET.Element) -> str:
        return self._decode(node.text or "", node.get("encoding"))

    def _decode(self, text: str, encoding: str | None) -> str:
        if encoding is None:
            return text
        if encoding != "base64":
            raise EntitySerializationException(self.wire_format, f"unknown encoding {encoding!r}")
        try:
            return base64.b64decode(text, validate=True).decode("utf-8", "surrogatepass")
        except (binascii.Error, UnicodeDecodeError) as exc:
            raise EntitySerializationException(
                self.wire_format, f"invalid base64 text {text!r}"
            ) from exc

    def _get_int(self, parent: ET.Element, tag: str) -> int:
        text = self._get_text(parent, tag)
        if not text:
            return 0
        try:
            return int(text.strip())
        except ValueError as exc:
            raise EntitySerializationException(
                self.wire_format, f"<{tag}> is not an integer: {text!r}"
            ) from exc
