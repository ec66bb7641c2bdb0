"""
exporters/markup_codec.py

Tagged text records for saving and loading circuit documents.

One record per instance, one record per line:

    <component><pathComponent>true</pathComponent><start-x>1.0</start-x>...
    <type>1</type><label>R</label><latexParameters>to[R,l=$R$]</latexParameters></component>

Tag values are taken verbatim (no escaping). A value is the text between
the first opening tag and the first closing tag that follows it.

No Qt dependencies.
"""

import logging

from models.circuit import CircuitModel
from models.component import ComponentInstance, create_instance
from models.exceptions import InvalidKind, MarkupError
from models.identifiers import IdentifierAllocator

logger = logging.getLogger(__name__)

RECORD_TAG = "component"
SEGMENT_COORD_TAGS = ("start-x", "start-y", "end-x", "end-y")
POINT_COORD_TAGS = ("position-x", "position-y")


def _tag(name, value):
    return f"<{name}>{value}</{name}>"


def _single_line(name, text):
    """Records are one per line, so line breaks in a value become spaces."""
    if "\n" not in text:
        return text
    logger.warning("Replacing line breaks in <%s> with spaces", name)
    return text.replace("\r\n", " ").replace("\n", " ")


def serialize(instance: ComponentInstance) -> str:
    """Return the single-line markup record for an instance."""
    parts = [_tag("pathComponent", "true" if instance.is_path else "false")]
    if instance.is_path:
        (x1, y1), (x2, y2) = instance.start, instance.end
        values = (x1, y1, x2, y2)
        tags = SEGMENT_COORD_TAGS
    else:
        values = instance.position
        tags = POINT_COORD_TAGS
    parts.extend(_tag(name, float(value)) for name, value in zip(tags, values))
    parts.append(_tag("type", int(instance.kind)))
    parts.append(_tag("label", _single_line("label", instance.label)))
    parts.append(_tag("latexParameters", _single_line("latexParameters", instance.code_template)))
    return _tag(RECORD_TAG, "".join(parts))


def read_tag(record: str, name: str) -> str:
    """
    Return the text of the first <name>...</name> in a record.

    A missing opening or closing tag yields "" and a warning.
    """
    opening = f"<{name}>"
    closing = f"</{name}>"
    start = record.find(opening)
    if start == -1:
        logger.warning("Tag <%s> not found in record", name)
        return ""
    start += len(opening)
    end = record.find(closing, start)
    if end == -1:
        logger.warning("Closing tag </%s> not found in record", name)
        return ""
    return record[start:end]


def _read_float(record, name):
    text = read_tag(record, name)
    try:
        return float(text)
    except ValueError:
        raise MarkupError(f"Invalid value for <{name}>: {text!r}", record) from None


def deserialize(record: str, allocator: IdentifierAllocator) -> ComponentInstance:
    """
    Rebuild an instance from a markup record.

    The instance goes through the normal constructors (so family kinds
    receive a fresh identifier from the allocator), then its label and
    template are replaced with the persisted text.

    Raises:
        MarkupError: if the type code or a coordinate cannot be parsed,
            or the type does not match the stored geometry.
    """
    type_text = read_tag(record, "type")
    try:
        code = int(type_text)
    except ValueError:
        raise MarkupError(f"Invalid component type: {type_text!r}", record) from None

    is_path = read_tag(record, "pathComponent").strip().lower() == "true"
    try:
        if is_path:
            x1, y1, x2, y2 = (_read_float(record, name) for name in SEGMENT_COORD_TAGS)
            instance = create_instance(code, allocator, start=(x1, y1), end=(x2, y2))
        else:
            x, y = (_read_float(record, name) for name in POINT_COORD_TAGS)
            instance = create_instance(code, allocator, position=(x, y))
    except InvalidKind as e:
        raise MarkupError(str(e), record) from e

    instance.set_label(read_tag(record, "label"))
    instance.set_code_template(read_tag(record, "latexParameters"))
    return instance


def dump_document(model: CircuitModel) -> str:
    """Serialize every instance, one newline-terminated record each."""
    return "".join(serialize(instance) + "\n" for instance in model)


def load_document(text: str, model: CircuitModel) -> int:
    """
    Replace the contents of model with the records in text.

    Identifier counters are reset first, so reloaded family kinds are
    renumbered from 1 in record order. Blank lines are ignored.
    Records that cannot be parsed are logged and skipped.

    Returns:
        The number of skipped records.
    """
    model.clear()
    skipped = 0
    for line_number, line in enumerate(text.split("\n"), start=1):
        record = line.strip()
        if not record:
            continue
        try:
            model.append(deserialize(record, model.allocator))
        except MarkupError as e:
            skipped += 1
            logger.warning("Skipping record on line %d: %s", line_number, e)
    logger.debug("Loaded %d components (%d skipped)", len(model), skipped)
    return skipped
