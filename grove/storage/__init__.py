from ._errors import ResolveError, UnknownReferenceError

from . import fs
