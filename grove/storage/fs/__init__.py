from ._database import FSDatabase, makedirs_with_perms
