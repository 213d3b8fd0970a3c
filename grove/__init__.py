"""Content-addressed object storage in the git format."""

__version__ = "0.1.0"

from . import encoding, graph, objects, storage, io
from ._config import Config, load_config, DEFAULT_MAX_DEPTH
from ._repository import (
    Repository,
    create_repository,
    find_repository,
    NotARepositoryError,
    UnsupportedRepositoryError,
    WorktreeNotEmptyError,
)
from ._resolve import find_object, UnexpectedKindError
from ._checkout import (
    checkout,
    CheckoutError,
    TargetNotDirectoryError,
    TargetNotEmptyError,
    NoTreeFieldError,
    NotATreeError,
    UnresolvedTreeError,
    CheckoutIOError,
    InvalidLeafPathError,
    TreeDepthError,
)
from ._log import iter_history, format_graphviz, NotACommitError

__all__ = list(locals().keys())
