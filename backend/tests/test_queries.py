"""
LinkHub Backend — Query Mapping Unit Tests
============================================

What we test:
    ✅ Filter, update and projection document shapes
    ✅ ObjectId parsing: valid ids filter on _id, invalid ids never match
"""

from bson import ObjectId

from linkhub import queries


class TestDocumentBuilders:

    def test_match_all_is_empty_filter(self):
        assert queries.match_all() == {}

    def test_match_builds_equality_filter(self):
        assert queries.match("userId", "u1") == {"userId": "u1"}

    def test_set_fields_keeps_none_values(self):
        """A missing headline is written as null, not dropped from the update."""
        assert queries.set_fields(headline=None) == {"$set": {"headline": None}}

    def test_set_fields_multiple(self):
        assert queries.set_fields(isPremium=True, status="connected") == {
            "$set": {"isPremium": True, "status": "connected"}
        }

    def test_increment_defaults_to_one(self):
        assert queries.increment("likes") == {"$inc": {"likes": 1}}

    def test_push_single_value(self):
        assert queries.push("skills", "python") == {"$push": {"skills": "python"}}

    def test_only_builds_inclusion_projection(self):
        assert queries.only("profileViews") == {"profileViews": 1}


class TestParseObjectId:

    def test_valid_id(self):
        oid = ObjectId()
        parsed = queries.parse_object_id(str(oid))

        assert parsed.is_valid
        assert parsed.value == oid
        assert parsed.as_filter() == {"_id": oid}

    def test_malformed_id_is_invalid(self):
        parsed = queries.parse_object_id("not-a-valid-id")

        assert not parsed.is_valid
        assert parsed.value is None
        assert parsed.raw == "not-a-valid-id"

    def test_invalid_id_filter_matches_nothing(self):
        assert queries.parse_object_id("xyz").as_filter() == queries.NO_MATCH

    def test_no_match_filter_is_a_copy(self):
        """Callers mutating the returned filter must not change NO_MATCH."""
        f = queries.parse_object_id("xyz").as_filter()
        f["extra"] = 1
        assert "extra" not in queries.NO_MATCH

    def test_wrong_length_hex_is_invalid(self):
        assert not queries.parse_object_id("abc123").is_valid

    def test_none_is_invalid(self):
        assert not queries.parse_object_id(None).is_valid
