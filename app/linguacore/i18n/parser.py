"""PO catalog parsing and serialization.

Reads the block-structured PO text format into TranslationEntry records
and writes entries back out in the same format.

Block grammar:
    # comment lines, ignored
    msgctxt "<escaped context>"     (optional)
    msgid "<escaped text>"
    msgstr "<escaped body>"
    <blank line separates blocks>

Adjacent quoted segments on their own lines concatenate into the field
above them. Parsing is pure: it keeps no state between calls.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Set, Union

from linguacore.i18n.models import TranslationEntry, TranslationKey
from linguacore.logging import get_module_logger

logger = get_module_logger()

FIELDS = ("msgctxt", "msgid", "msgstr")

_UNESCAPES = {
    '"': '"',
    "\\": "\\",
    "n": "\n",
    "t": "\t",
    "r": "\r",
}

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
}


@dataclass(frozen=True)
class ParseIssue:
    """A block that was skipped while parsing.

    Attributes:
        line: 1-based line number where the block starts.
        reason: Human readable description of the problem.
    """

    line: int
    reason: str


@dataclass
class ParseResult:
    """Entries parsed from a source, in file order, plus skipped blocks."""

    entries: List[TranslationEntry] = field(default_factory=list)
    issues: List[ParseIssue] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)


class _Block:
    """Fields accumulated for the block currently being read."""

    def __init__(self, line: int):
        self.line = line
        self.fields: Dict[str, str] = {}
        self.current: Optional[str] = None
        self.error: Optional[str] = None
        self.seen: Set[str] = set()

    @property
    def is_empty(self) -> bool:
        return not self.fields and self.error is None


def unescape(segment: str) -> str:
    """Decode the inside of one quoted segment.

    Raises:
        ValueError: On an unescaped quote or a dangling backslash.
    """
    chars: List[str] = []
    i = 0
    while i < len(segment):
        char = segment[i]
        if char == "\\":
            if i + 1 >= len(segment):
                raise ValueError("dangling backslash")
            nxt = segment[i + 1]
            if nxt in _UNESCAPES:
                chars.append(_UNESCAPES[nxt])
            else:
                chars.append(char + nxt)
            i += 2
            continue
        if char == '"':
            raise ValueError("unescaped quote inside string")
        chars.append(char)
        i += 1
    return "".join(chars)


def escape(value: str) -> str:
    """Encode a string for use inside a quoted segment."""
    return "".join(_ESCAPES.get(char, char) for char in value)


def _parse_quoted(value: str) -> str:
    value = value.strip()
    if len(value) < 2 or not value.startswith('"') or not value.endswith('"'):
        raise ValueError(f"expected quoted string, got {value!r}")
    return unescape(value[1:-1])


def _finish(block: _Block, result: ParseResult) -> None:
    if block.is_empty:
        return

    problem = block.error
    if problem is None and "msgid" not in block.fields:
        problem = "missing msgid"
    if problem is None and "msgstr" not in block.fields:
        problem = "missing msgstr"

    if problem is not None:
        logger.warning("skipped_malformed_block", line=block.line, reason=problem)
        result.issues.append(ParseIssue(line=block.line, reason=problem))
        return

    text = block.fields["msgid"]
    if text == "":
        # Standard PO header block
        logger.debug("skipped_header_block", line=block.line)
        return

    key = TranslationKey(text=text, context=block.fields.get("msgctxt"))
    result.entries.append(TranslationEntry(key=key, body=block.fields["msgstr"]))


def _starts_record(line: str, block: _Block) -> bool:
    """Whether a line inside a broken block opens the next record.

    A msgid only does so once the broken block already had its own msgid
    or msgstr, so a bad msgctxt line still owns the msgid after it.
    """
    keyword = line.split(None, 1)[0]
    if keyword == "msgctxt":
        return True
    return keyword == "msgid" and bool(block.seen & {"msgid", "msgstr"})


def parse_catalog(data: Union[bytes, str]) -> ParseResult:
    """Parse PO source into translation entries.

    Malformed blocks are skipped and reported in ``ParseResult.issues``;
    they never abort parsing of the rest of the source. Byte-order marks
    and surrounding whitespace on each line are ignored.

    Args:
        data: Raw UTF-8 bytes or already decoded text.

    Returns:
        ParseResult with entries in source order (duplicates preserved).

    Raises:
        UnicodeDecodeError: If bytes are not valid UTF-8.
    """
    text = data.decode("utf-8-sig") if isinstance(data, bytes) else data
    result = ParseResult()
    block = _Block(line=1)

    for lineno, raw_line in enumerate(text.split("\n"), start=1):
        line = raw_line.strip().lstrip("\ufeff").strip()

        if not line:
            _finish(block, result)
            block = _Block(line=lineno + 1)
            continue

        if line.startswith("#"):
            continue

        if block.is_empty:
            block.line = lineno

        if block.error is not None:
            if not _starts_record(line, block):
                continue
            _finish(block, result)
            block = _Block(line=lineno)

        if line.startswith('"'):
            if block.current is None:
                block.error = f"quoted string without a field on line {lineno}"
                continue
            try:
                block.fields[block.current] += _parse_quoted(line)
            except ValueError as e:
                block.error = f"{e} on line {lineno}"
            continue

        parts = line.split(None, 1)
        keyword = parts[0]
        value = parts[1] if len(parts) > 1 else ""
        if keyword not in FIELDS:
            block.error = f"unknown field {keyword!r} on line {lineno}"
            continue

        if keyword in ("msgctxt", "msgid") and "msgstr" in block.fields:
            # New record without a blank separator line
            _finish(block, result)
            block = _Block(line=lineno)
        block.seen.add(keyword)

        if keyword in block.fields:
            block.error = f"duplicate field {keyword!r} on line {lineno}"
            continue

        try:
            block.fields[keyword] = _parse_quoted(value)
        except ValueError as e:
            block.error = f"{e} on line {lineno}"
            continue
        block.current = keyword

    _finish(block, result)

    logger.debug(
        "parsed_catalog",
        entry_count=len(result.entries),
        issue_count=len(result.issues),
    )
    return result


def _write_field(keyword: str, value: str) -> List[str]:
    if "\n" not in value.rstrip("\n"):
        return [f'{keyword} "{escape(value)}"']

    lines = [f'{keyword} ""']
    segments = value.split("\n")
    for index, segment in enumerate(segments):
        if index < len(segments) - 1:
            segment += "\n"
        if segment:
            lines.append(f'"{escape(segment)}"')
    return lines


def serialize_entry(entry: TranslationEntry, comments: Iterable[str] = ()) -> str:
    """Render one entry as a PO block (without the trailing blank line)."""
    lines = [f"# {comment}" for comment in comments]
    if entry.key.context is not None:
        lines.extend(_write_field("msgctxt", entry.key.context))
    lines.extend(_write_field("msgid", entry.key.text))
    lines.extend(_write_field("msgstr", entry.body))
    return "\n".join(lines)


def serialize_entries(entries: Iterable[TranslationEntry]) -> str:
    """Render entries as PO text, one block per entry."""
    blocks = [serialize_entry(entry) for entry in entries]
    if not blocks:
        return ""
    return "\n\n".join(blocks) + "\n"
