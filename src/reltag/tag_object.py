"""Construction of annotated tag objects.

A tag object is a header block followed by a blank line and the message:

    object <commit id>
    type commit
    tag <name>
    tagger <name> <email> <timestamp> <tz>

    <message>

Signed tags carry an ASCII-armoured detached signature of everything above,
appended directly after the message.
"""

import hashlib


def build_tag_payload(
    *,
    object_id: str,
    tag_name: str,
    tagger_ident: str,
    message: str,
) -> str:
    """Build the unsigned payload of an annotated tag pointing at a commit.

    The message is normalized to end with exactly one newline.
    """
    body = message.rstrip("\n") + "\n"
    return (
        f"object {object_id}\n"
        "type commit\n"
        f"tag {tag_name}\n"
        f"tagger {tagger_ident}\n"
        "\n"
        f"{body}"
    )


def append_signature(payload: str, signature: str) -> str:
    """Append a detached signature to a tag payload."""
    if not signature.endswith("\n"):
        signature = signature + "\n"
    return payload + signature


def parse_tag_target(payload: str) -> str:
    """Return the object id named by the 'object' header of a tag payload.

    Raises:
        ValueError: If the payload has no 'object' header
    """
    for line in payload.splitlines():
        if line == "":
            break
        if line.startswith("object "):
            return line[len("object ") :]
    raise ValueError("Tag payload has no 'object' header")


def compute_tag_object_id(payload: str) -> str:
    """Compute the SHA-1 object id git assigns to a tag payload."""
    data = payload.encode("utf-8")
    header = f"tag {len(data)}\0".encode()
    return hashlib.sha1(header + data).hexdigest()
