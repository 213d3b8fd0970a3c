import argparse

import grove


def register(sub_parsers: argparse._SubParsersAction) -> None:

    hash_cmd = sub_parsers.add_parser("hash-object", help=_hash_object.__doc__)
    hash_cmd.add_argument(
        "--type",
        "-t",
        choices=grove.graph.ObjectKind.names(),
        default=grove.graph.ObjectKind.BLOB.value,
        help="The kind of object to create (default: %(default)s)",
    )
    hash_cmd.add_argument(
        "--write",
        "-w",
        action="store_true",
        help="Store the object in the current repository",
    )
    hash_cmd.add_argument("path", metavar="FILE", help="The file to read data from")
    hash_cmd.set_defaults(func=_hash_object)


def _hash_object(args: argparse.Namespace) -> None:
    """Compute the digest of an object, and optionally store it."""

    with open(args.path, "rb") as reader:
        payload = reader.read()
    obj = grove.objects.deserialize(args.type, payload)

    if args.write:
        repo = grove.find_repository()
        digest = repo.objects.write_object(obj)
    else:
        digest = obj.digest()
    print(digest.str())
