# JSON Schemas for HN API responses. The decoding ones stay permissive:
# the service omits absent fields instead of nulling them.
from jsonschema import Draft202012Validator

ITEM_TYPES = ["story", "comment", "job", "poll", "pollopt"]

_id_array = {"type": "array", "items": {"type": "integer"}}

# What the client accepts from /item/{id}: any object whose known fields have
# the right types. Nothing is required, so {} decodes to an all-zero Item.
item_schema = {
    "type": "object",
    "properties": {
        "id": {"type": "integer"},
        "type": {"type": "string"},
        "by": {"type": "string"},
        "time": {"type": "integer"},  # Unix seconds
        "text": {"type": "string"},
        "title": {"type": "string"},
        "url": {"type": "string"},
        "score": {"type": "integer"},
        "descendants": {"type": "integer"},
        "kids": _id_array,
        "dead": {"type": "boolean"},
        "deleted": {"type": "boolean"},
        "parent": {"type": "integer"},
        "poll": {"type": "integer"},
        "parts": _id_array,
    },
    "additionalProperties": True,
}

user_schema = {
    "type": "object",
    "properties": {
        "id": {"type": "string"},
        "about": {"type": "string"},
        "created": {"type": "integer"},
        "karma": {"type": "integer"},
        "delay": {"type": "integer"},
        "submitted": _id_array,
    },
    "additionalProperties": True,
}

id_list_schema = _id_array

max_item_schema = {"type": "integer"}

updates_schema = {
    "type": "object",
    "properties": {
        "items": _id_array,
        "profiles": {"type": "array", "items": {"type": "string"}},
    },
    "additionalProperties": True,
}

# Stricter documents describing what live data looks like; the live suite
# checks real responses against these.
common_item_schema = {
    "allOf": [
        item_schema,
        {
            "type": "object",
            "required": ["id", "type", "time"],
            "properties": {"type": {"enum": ITEM_TYPES}},
        },
    ]
}

comment_schema = {
    "allOf": [
        common_item_schema,
        {"type": "object", "properties": {"type": {"const": "comment"}}, "required": ["parent"]},
    ]
}

story_schema = {
    "allOf": [
        common_item_schema,
        {"type": "object", "properties": {"type": {"const": "story"}}},
    ]
}

job_schema = {
    "allOf": [
        common_item_schema,
        {"type": "object", "properties": {"type": {"const": "job"}}},
    ]
}

poll_schema = {
    "allOf": [
        common_item_schema,
        {"type": "object", "properties": {"type": {"const": "poll"}}, "required": ["parts"]},
    ]
}

pollopt_schema = {
    "allOf": [
        common_item_schema,
        {"type": "object", "properties": {"type": {"const": "pollopt"}}, "required": ["poll"]},
    ]
}

# Built once; the client validates every response against these.
item_validator = Draft202012Validator(item_schema)
user_validator = Draft202012Validator(user_schema)
id_list_validator = Draft202012Validator(id_list_schema)
max_item_validator = Draft202012Validator(max_item_schema)
updates_validator = Draft202012Validator(updates_schema)
