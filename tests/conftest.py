"""
Test configuration and fixtures for the pgmodel test suite.
Provides a sample introspection snapshot shaped like the output of the
introspection query (camelCase keys, extra catalog fields included).
"""

import json

import pytest

from pgmodel.introspection.snapshot import IntrospectionSnapshot

TEST_SCHEMA = "app"

# Table ids
USERS = "16385"
POSTS = "16400"
TAGS = "16420"
POST_TAGS = "16430"
COMMENTS = "16440"
AUDIT_LOG = "16460"
SECRETS = "16500"

# Type ids
INT4 = "23"
TEXT = "25"
BOOL = "16"
TIMESTAMPTZ = "1184"
RECORD = "2249"
VOID = "2278"
USER_STATUS = "16390"
VISIBILITY = "16391"


def make_class(id, name, namespace=TEST_SCHEMA, selectable=True, description=None):
    return {
        "kind": "class",
        "id": id,
        "name": name,
        "namespaceName": namespace,
        "description": description,
        "aclInsertable": True,
        "aclSelectable": selectable,
        "aclUpdatable": True,
        "aclDeletable": True,
    }


def make_attribute(class_id, num, name, type_id, not_null=False, has_default=False):
    return {
        "kind": "attribute",
        "classId": class_id,
        "num": num,
        "name": name,
        "description": None,
        "isNotNull": not_null,
        "hasDefault": has_default,
        "typeId": type_id,
        "typeModifier": None,
        "identity": "",
        "aclInsertable": True,
        "aclSelectable": True,
        "aclUpdatable": True,
        "columnLevelSelectGrant": False,
    }


def make_constraint(id, class_id, name, type, key_nums, foreign_class_id=None, foreign_nums=None):
    return {
        "kind": "constraint",
        "id": id,
        "classId": class_id,
        "name": name,
        "description": None,
        "type": type,
        "keyAttributeNums": key_nums,
        "foreignClassId": foreign_class_id,
        "foreignKeyAttributeNums": foreign_nums,
    }


def make_type(id, name, category, enum_variants=None, description=None):
    return {
        "kind": "type",
        "id": id,
        "name": name,
        "description": description,
        "category": category,
        "tags": {},
        "enumVariants": enum_variants,
        "namespaceName": "pg_catalog" if enum_variants is None else TEST_SCHEMA,
        "isPgArray": False,
    }


def make_procedure(name, is_stable, arg_names, arg_type_ids, input_args_count, return_type_id,
                   returns_set=False, description=None):
    return {
        "kind": "procedure",
        "name": name,
        "description": description,
        "aclExecutable": True,
        "isStable": is_stable,
        "argNames": arg_names,
        "argTypeIds": arg_type_ids,
        "inputArgsCount": input_args_count,
        "returnTypeId": return_type_id,
        "returnsSet": returns_set,
        "isStrict": False,
        "namespaceName": TEST_SCHEMA,
    }


@pytest.fixture
def sample_introspection_data() -> dict:
    """A small blog schema: users, posts, tags, a junction table, comments and a hidden audit log."""
    return {
        "class": [
            make_class(USERS, "users", description="Registered users"),
            make_class(POSTS, "posts"),
            make_class(TAGS, "tags"),
            make_class(POST_TAGS, "post_tags"),
            make_class(COMMENTS, "comments"),
            make_class(AUDIT_LOG, "audit_log", selectable=False),
            make_class(SECRETS, "secrets", namespace="private"),
        ],
        "attribute": [
            # declared out of order on purpose; num 6 of users was dropped
            make_attribute(USERS, 7, "created_at", TIMESTAMPTZ, has_default=True),
            make_attribute(USERS, 1, "id", INT4, not_null=True, has_default=True),
            make_attribute(USERS, 2, "name", TEXT, not_null=True),
            make_attribute(USERS, 3, "email", TEXT),
            make_attribute(USERS, 4, "is_active", BOOL, has_default=True),
            make_attribute(USERS, 5, "status", USER_STATUS),
            make_attribute(POSTS, 1, "id", INT4, not_null=True, has_default=True),
            make_attribute(POSTS, 2, "author_id", INT4, not_null=True),
            make_attribute(POSTS, 3, "title", TEXT, not_null=True),
            make_attribute(POSTS, 4, "published", BOOL),
            make_attribute(POSTS, 5, "visibility", VISIBILITY),
            make_attribute(TAGS, 1, "id", INT4, not_null=True),
            make_attribute(TAGS, 2, "label", TEXT, not_null=True),
            make_attribute(POST_TAGS, 1, "post_id", INT4, not_null=True),
            make_attribute(POST_TAGS, 2, "tag_id", INT4, not_null=True),
            make_attribute(COMMENTS, 1, "id", INT4, not_null=True),
            make_attribute(COMMENTS, 2, "post_id", INT4, not_null=True),
            make_attribute(COMMENTS, 3, "author_id", INT4, not_null=True),
            make_attribute(COMMENTS, 4, "body", TEXT),
            make_attribute(COMMENTS, 5, "visibility", VISIBILITY),
            make_attribute(AUDIT_LOG, 1, "id", INT4, not_null=True),
            make_attribute(AUDIT_LOG, 2, "user_id", INT4),
            make_attribute(SECRETS, 1, "owner_id", INT4),
        ],
        "constraint": [
            make_constraint("17001", USERS, "users_pkey", "p", [1]),
            make_constraint("17002", USERS, "users_email_key", "u", [3]),
            make_constraint("17003", POSTS, "posts_pkey", "p", [1]),
            make_constraint("17004", POSTS, "posts_author_id_fkey", "f", [2], USERS, [1]),
            make_constraint("17005", TAGS, "tags_pkey", "p", [1]),
            make_constraint("17006", TAGS, "tags_label_key", "u", [2]),
            make_constraint("17007", POST_TAGS, "post_tags_pkey", "p", [1, 2]),
            make_constraint("17008", POST_TAGS, "post_tags_post_id_fkey", "f", [1], POSTS, [1]),
            make_constraint("17009", POST_TAGS, "post_tags_tag_id_fkey", "f", [2], TAGS, [1]),
            make_constraint("17010", COMMENTS, "comments_pkey", "p", [1]),
            make_constraint("17011", COMMENTS, "comments_post_id_fkey", "f", [2], POSTS, [1]),
            make_constraint("17012", COMMENTS, "comments_author_id_fkey", "f", [3], USERS, [1]),
            make_constraint("17013", AUDIT_LOG, "audit_log_user_id_fkey", "f", [2], USERS, [1]),
            make_constraint("17014", SECRETS, "secrets_owner_id_fkey", "f", [1], USERS, [1]),
        ],
        "type": [
            make_type(INT4, "int4", "N", description="-2 billion to 2 billion integer, 4-byte storage"),
            make_type(TEXT, "text", "S"),
            make_type(BOOL, "bool", "B"),
            make_type(TIMESTAMPTZ, "timestamptz", "D"),
            make_type(RECORD, "record", "P"),
            make_type(VOID, "void", "P"),
            make_type(USER_STATUS, "user_status", "E", enum_variants=["active", "suspended"]),
            make_type(VISIBILITY, "visibility", "E", enum_variants=["public", "private"]),
        ],
        "index": [
            {"kind": "index", "classId": USERS, "attributeNums": [3]},
            {"kind": "index", "classId": USERS, "attributeNums": [4]},
            {"kind": "index", "classId": USERS, "attributeNums": [2, 3]},
            {"kind": "index", "classId": POSTS, "attributeNums": [2]},
            {"kind": "index", "classId": POST_TAGS, "attributeNums": [1, 2]},
        ],
        "procedure": [
            make_procedure("users_full_name", True, ["u"], [INT4], 1, TEXT),
            make_procedure("search_posts", True, ["_query", "id", "title"], [TEXT, INT4, TEXT], 1,
                           RECORD, returns_set=True),
            make_procedure("delete_post", False, ["_post_id"], [INT4], 1, VOID),
            make_procedure("post_tags_count", True, [], [], 0, INT4),
            make_procedure("get_user_count", True, [], [], 0, INT4),
        ],
    }


@pytest.fixture
def sample_snapshot(sample_introspection_data) -> IntrospectionSnapshot:
    return IntrospectionSnapshot.model_validate(sample_introspection_data)


@pytest.fixture
def snapshot_file(tmp_path, sample_introspection_data):
    path = tmp_path / "introspection.json"
    path.write_text(json.dumps(sample_introspection_data))
    return path
