"""Pydantic field type for endpoint identifiers.

Models that carry endpoints (source, destination, report-to) declare them as
``EndpointIDField``. Input may be an EndpointID or its URI text; output is
always the canonical text.

Examples:
    >>> from pydantic import BaseModel
    >>> class Route(BaseModel):
    ...     destination: EndpointIDField
    >>> Route(destination="ipn:1.2").destination.node_number
    1
    >>> Route(destination="dtn://dest/").model_dump()
    {'destination': 'dtn://dest/'}
"""

from __future__ import annotations

from typing import Annotated

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from dtneid.domain.eid import EndpointID
from dtneid.domain.parser import coerce_endpoint
from dtneid.domain.render import render_endpoint


def _validate_endpoint(value: object) -> EndpointID:
    # Pydantic only converts ValueError into ValidationError.
    if not isinstance(value, EndpointID | str):
        msg = f"expected an endpoint or its URI text, got {type(value).__name__}"
        raise ValueError(msg)
    return coerce_endpoint(value)


EndpointIDField = Annotated[
    EndpointID,
    PlainValidator(_validate_endpoint),
    PlainSerializer(render_endpoint, return_type=str),
    WithJsonSchema({"type": "string", "pattern": "^[a-z]+:.*$"}),
]
