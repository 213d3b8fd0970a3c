from typing import List, Tuple, Iterable, Optional, BinaryIO

from .. import encoding, graph

MESSAGE_KEY = "message"


def parse_kvlm(raw: str) -> Tuple[List[Tuple[str, str]], str]:
    """Parse a key-value list with message into its headers and message.

    Each header is a key and value separated by a space. Values continue
    onto following lines that start with a single space, which is
    stripped. A blank line separates the headers from the message,
    which runs to the end of the data.

    Raises:
        encoding.MalformedHeaderError: if the headers are not terminated
            by a newline, or the blank line is missing
    """

    headers = []
    pos = 0
    while True:
        space = raw.find(" ", pos)
        newline = raw.find("\n", pos)

        if space < 0 or (newline >= 0 and newline < space):
            if newline != pos:
                raise encoding.MalformedHeaderError(
                    f"Expected a blank line before the message at offset {pos}"
                )
            return headers, raw[pos + 1 :]

        key = raw[pos:space]
        end = newline
        while end >= 0 and raw.startswith(" ", end + 1):
            end = raw.find("\n", end + 1)
        if end < 0:
            raise encoding.MalformedHeaderError(
                f"Header is missing its terminating newline: {key!r}"
            )

        value = raw[space + 1 : end].replace("\n ", "\n")
        headers.append((key, value))
        pos = end + 1


def serialize_kvlm(headers: Iterable[Tuple[str, str]], message: str) -> str:
    """Serialize headers and message in the format read by parse_kvlm."""

    lines = []
    for key, value in headers:
        value = value.replace("\n", "\n ")
        lines.append(f"{key} {value}\n")
    lines.append("\n")
    lines.append(message)
    return "".join(lines)


class KeyValueObject(graph.Object):
    """A list of ordered key-value headers followed by a free-form message.

    Keys may appear more than once, each occurrence is kept in order.
    """

    def __init__(
        self, headers: Iterable[Tuple[str, str]] = (), message: str = ""
    ) -> None:

        self._headers: List[Tuple[str, str]] = []
        for key, value in headers:
            self.append(key, value)
        self.message = message

    def __repr__(self) -> str:

        return f"<{self.__class__.__name__} '{self.digest().str()}'>"

    @property
    def headers(self) -> List[Tuple[str, str]]:
        return list(self._headers)

    def keys(self) -> List[str]:
        """Return the distinct header keys, in the order they first appear."""

        keys: List[str] = []
        for key, _ in self._headers:
            if key not in keys:
                keys.append(key)
        return keys

    def get(self, key: str) -> Optional[List[str]]:
        """Return all values of the given key, or None if it is not present."""

        if key == MESSAGE_KEY:
            return [self.message]
        values = [v for k, v in self._headers if k == key]
        return values or None

    def append(self, key: str, value: str) -> None:

        if not key or " " in key or "\n" in key:
            raise ValueError(f"Invalid header key: {key!r}")
        if key == MESSAGE_KEY:
            raise ValueError(f"{MESSAGE_KEY!r} is reserved for the message body")
        self._headers.append((key, value))

    def encode(self, writer: BinaryIO) -> None:

        writer.write(serialize_kvlm(self._headers, self.message).encode("utf-8"))

    @classmethod
    def decode(cls, reader: BinaryIO) -> "KeyValueObject":

        data = reader.read()
        try:
            raw = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise encoding.BadEncodingError(cls.kind.value, e)
        headers, message = parse_kvlm(raw)
        obj = cls(message=message)
        obj._headers.extend(headers)
        return obj


class Commit(KeyValueObject):
    """Commits record a tree along with its parents and authorship."""

    kind = graph.ObjectKind.COMMIT

    @property
    def tree(self) -> Optional[str]:
        """Return the first tree referenced by this commit, if any."""

        trees = self.get("tree")
        return trees[0] if trees else None

    @property
    def parents(self) -> List[str]:
        return self.get("parent") or []


class Tag(KeyValueObject):
    """Annotated tags name another object with a message."""

    kind = graph.ObjectKind.TAG

    @property
    def object(self) -> Optional[str]:

        targets = self.get("object")
        return targets[0] if targets else None
