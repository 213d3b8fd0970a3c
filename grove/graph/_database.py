from typing import Iterable
import abc

from .. import encoding
from ._object import Object
from ._errors import UnknownObjectError


class DatabaseView(metaclass=abc.ABCMeta):
    """A read-only object database."""

    @abc.abstractmethod
    def read_object(self, digest: encoding.Digest) -> Object:
        """Read information about the given object from the database.

        Raises:
            UnknownObjectError: if the identified object does not exist in the database.
        """
        ...

    @abc.abstractmethod
    def iter_digests(self) -> Iterable[encoding.Digest]:
        """Iterate all the object digests in this database."""
        ...

    @abc.abstractmethod
    def resolve_full_digest(self, name: str) -> encoding.Digest:
        """Resolve the complete object digest from the given name.

        Raises:
            ResolveError: if the name does not identify a single object
        """
        ...

    def has_object(self, digest: encoding.Digest) -> bool:

        try:
            self.read_object(digest)
        except UnknownObjectError:
            return False
        else:
            return True

    def iter_objects(self) -> Iterable[Object]:
        """Iterate all the object in this database."""

        for digest in self.iter_digests():
            yield self.read_object(digest)


class Database(DatabaseView):
    """Databases store and retrieve graph objects."""

    @abc.abstractmethod
    def write_object(self, obj: Object, persist: bool = True) -> encoding.Digest:
        """Return the digest of an object, storing it in the database if persist is set.

        Writing an object that already exists is a no-op.
        """
        ...
