"""Binary codec layer — wire items and CBOR bytes for endpoint identifiers."""
