from typing import Iterator
import io
import os
import uuid

import sentry_sdk
import structlog

from ... import graph, encoding, objects
from .._errors import UnknownReferenceError

_logger = structlog.get_logger("grove.storage.fs")


class FSDatabase(graph.Database):
    """An object database that stores compressed frames on the local file system.

    Each object is stored under a path derived from its digest,
    using the first two hex characters as a directory name.
    """

    def __init__(
        self, root: str, compression_level: int = encoding.DEFAULT_COMPRESSION
    ) -> None:

        self.__root = os.path.abspath(root)
        self.compression_level = compression_level
        self.directory_permissions = 0o777
        self.file_permissions = 0o444

    def __repr__(self) -> str:
        return f"FSDatabase({self.__root!r})"

    @property
    def root(self) -> str:
        """Return the root directory of this storage."""
        return self.__root

    def iter_digests(self) -> Iterator[encoding.Digest]:

        try:
            dirs = os.listdir(self.__root)
        except FileNotFoundError:
            dirs = []

        for dirname in sorted(dirs):
            dirpath = os.path.join(self.__root, dirname)
            if len(dirname) != 2 or not os.path.isdir(dirpath):
                continue
            for entry in sorted(os.listdir(dirpath)):
                digest_str = dirname + entry
                if not encoding.is_digest_string(digest_str):
                    # working files from interrupted writes
                    continue
                yield encoding.parse_digest(digest_str)

    def read_object(self, digest: encoding.Digest) -> graph.Object:

        path = self._build_digest_path(digest)
        try:
            with open(path, "rb") as f:
                data = f.read()
        except FileNotFoundError:
            if not os.path.isdir(self.__root):
                raise graph.StoreNotFoundError(self.__root)
            raise graph.UnknownObjectError(digest)
        except OSError as e:
            raise graph.StorageIOError(path, e) from e

        try:
            reader = io.BytesIO(encoding.decompress(data))
        except encoding.CorruptionError as e:
            raise graph.CorruptObjectError(digest, str(e)) from e

        try:
            kind_name, size = encoding.read_frame_header(reader)
        except encoding.FormatError as e:
            raise graph.CorruptObjectError(digest, str(e)) from e

        payload = reader.read()
        if len(payload) != size:
            raise graph.ObjectSizeError(digest, size, len(payload))

        try:
            kind = graph.ObjectKind(kind_name)
        except ValueError:
            raise graph.UnknownKindError(digest, kind_name)

        return objects.OBJECT_KINDS[kind].deserialize(payload)

    def write_object(self, obj: graph.Object, persist: bool = True) -> encoding.Digest:

        if getattr(obj, "kind", None) not in objects.OBJECT_KINDS:
            raise ValueError(f"Unknown object kind, cannot store: {type(obj)}")

        frame = obj.frame()
        digest = encoding.Hasher(frame).digest()
        if not persist:
            return digest

        path = self._build_digest_path(digest)
        if os.path.exists(path):
            _logger.debug("object already exists", digest=digest.str())
            return digest

        data = encoding.compress(frame, self.compression_level)
        try:
            self._ensure_base_dir(path)
        except OSError as e:
            raise graph.StorageIOError(os.path.dirname(path), e) from e

        working_file = os.path.join(os.path.dirname(path), "work-" + uuid.uuid4().hex)
        try:
            with open(working_file, "xb") as writer:
                writer.write(data)
            os.rename(working_file, path)
        except OSError as e:
            try:
                os.remove(working_file)
            except FileNotFoundError:
                pass
            raise graph.StorageIOError(path, e) from e

        try:
            os.chmod(path, self.file_permissions)
        except Exception as e:
            # not a good enough reason to fail entirely
            sentry_sdk.capture_exception(e)
            _logger.warning(f"Failed to set object permissions: {e}")

        _logger.debug("wrote object", kind=obj.kind.value, digest=digest.str())
        return digest

    def resolve_full_digest(self, name: str) -> encoding.Digest:
        """Resolve the complete object digest from the given name.

        Only complete digests are understood, in either hex case.

        Raises:
            UnknownReferenceError: if the name is not a complete digest
        """

        name = name.strip()
        if not encoding.is_digest_string(name):
            raise UnknownReferenceError(name)
        return encoding.parse_digest(name)

    def _build_digest_path(self, digest: encoding.Digest) -> str:

        digest_str = digest.str()
        return os.path.join(self.__root, digest_str[:2], digest_str[2:])

    def _ensure_base_dir(self, filepath: str) -> None:

        makedirs_with_perms(os.path.dirname(filepath), self.directory_permissions)


def makedirs_with_perms(dirname: str, perms: int = 0o777) -> None:
    """Recursively create the given directory with the appropriate permissions.

    Existing directories are left unchanged.
    """

    dirnames = os.path.normpath(os.path.abspath(dirname)).split(os.sep)
    for i in range(2, len(dirnames) + 1):
        dirname = os.path.join("/", *dirnames[0:i])
        if os.path.isdir(dirname):
            continue

        try:
            os.mkdir(dirname, mode=0o777)
        except FileExistsError:
            if not os.path.isdir(dirname):
                raise NotADirectoryError(dirname)
            continue

        try:
            os.chmod(dirname, perms)
        except PermissionError:
            # not fatal, so it's worth allowing things to continue
            # even though it could cause permission issues later on
            pass
