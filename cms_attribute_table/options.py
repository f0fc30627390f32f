from dataclasses import dataclass


@dataclass(frozen=True)
class DecodeOptions:
    # Forwarded to asn1crypto's ``load``; rejects trailing bytes after the
    # encoded value.
    strict: bool = False


DEFAULT_DECODE_OPTIONS = DecodeOptions()
