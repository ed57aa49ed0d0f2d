"""
LinkHub Backend — Request-to-Query Mapping
============================================

What:  Pure builders for the MongoDB filter, update and projection documents
       that every endpoint sends to the store.
Why:   Each endpoint is "parse params → build one document → one storage call".
       Keeping the document shapes here means the services read as a list of
       one-liners and the mapping can be unit-tested without a database.
How:   Plain functions returning dicts, plus an explicit ObjectId parse step.

Mapping conventions:
    Path identifier  → equality filter on the entity's id field
                       (userId, postId, connectionId) or on _id for messages
    Body field       → $set / $push operand
    Counter endpoint → $inc by exactly one
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from bson import ObjectId
from bson.errors import InvalidId

Query = Dict[str, Any]

# `$in` over an empty list matches nothing, including a document whose _id is null
NO_MATCH: Query = {"_id": {"$in": []}}


def match_all() -> Query:
    """Empty filter: every document in the collection."""
    return {}


def match(field: str, value: Any) -> Query:
    """Equality filter on a single field."""
    return {field: value}


def set_fields(**fields: Any) -> Query:
    """
    `$set` update for the given fields.

    None values are written as null rather than dropped: an update endpoint
    always issues its set, whatever the body held.
    """
    return {"$set": dict(fields)}


def increment(field: str, by: int = 1) -> Query:
    """`$inc` update; MongoDB treats an absent field as zero."""
    return {"$inc": {field: by}}


def push(field: str, value: Any) -> Query:
    """`$push` update; MongoDB creates the array if the field is absent."""
    return {"$push": {field: value}}


def only(*fields: str) -> Query:
    """Inclusion projection. `_id` is still returned unless excluded explicitly."""
    return {field: 1 for field in fields}


@dataclass(frozen=True)
class ParsedObjectId:
    """
    Result of parsing a client-supplied string into a MongoDB ObjectId.

    Either `value` holds the ObjectId (valid) or it is None (invalid). The
    caller decides what an invalid id means; `as_filter()` encodes the
    silent no-op choice by returning a filter that can never match.
    """

    raw: str
    value: Optional[ObjectId] = None

    @property
    def is_valid(self) -> bool:
        return self.value is not None

    def as_filter(self) -> Query:
        if self.value is None:
            return dict(NO_MATCH)
        return {"_id": self.value}


def parse_object_id(raw: str) -> ParsedObjectId:
    """Parse a 24-hex-character id; anything else yields an invalid result."""
    # ObjectId(None) would mint a fresh id
    if not isinstance(raw, str):
        return ParsedObjectId(raw=str(raw))
    try:
        return ParsedObjectId(raw=raw, value=ObjectId(raw))
    except (InvalidId, TypeError):
        return ParsedObjectId(raw=raw)
