"""Unit tests for PostDecoder."""

import json

import pytest

from pollexa.adapter.bundle import MockAssetCatalog, PostDecoder
from pollexa.adapter.error import DataCorruptedError, PostDecodeError
from pollexa.domain.value import Asset


def _record(post_id: str = "post_1", option_images=("img_a", "img_b")) -> dict:
    return {
        "id": post_id,
        "created_at": "2024-05-13T09:12:00Z",
        "content": "Which one?",
        "user": {"id": "user_1", "username": "emirhan", "image_name": "avatar_1"},
        "options": [
            {"id": f"{post_id}_option_{n}", "image_name": name, "voted": n}
            for n, name in enumerate(option_images, start=1)
        ],
        "voted_bys": [],
    }


class TestDecode:
    """Tests for decode method."""

    def test_decode_builds_posts_in_order(self):
        decoder = PostDecoder(MockAssetCatalog())
        payload = json.dumps([_record("post_1"), _record("post_2")])

        posts = decoder.decode(payload)

        assert [p.id for p in posts] == ["post_1", "post_2"]
        assert posts[0].options[0].image == Asset(name="img_a")
        assert posts[0].options[1].voted == 2
        assert posts[0].user.username == "emirhan"

    def test_decode_parses_iso8601_timestamps(self):
        record = _record()
        record["last_vote_at"] = "2024-05-13T10:00:00+02:00"

        (post,) = PostDecoder(MockAssetCatalog()).decode(json.dumps([record]))

        assert post.created_at.tzinfo is not None
        assert post.created_at.hour == 9
        assert post.last_vote_at.utcoffset().total_seconds() == 7200

    def test_decode_accepts_missing_voted_bys(self):
        record = _record()
        del record["voted_bys"]

        (post,) = PostDecoder(MockAssetCatalog()).decode(json.dumps([record]))

        assert post.voted_bys == []

    def test_unknown_option_image_raises_data_corrupted(self):
        catalog = MockAssetCatalog(names=["img_a", "img_b", "avatar_1"])
        payload = json.dumps([_record("post_1"), _record("post_2", ("img_a", "nope"))])

        with pytest.raises(DataCorruptedError) as exc_info:
            PostDecoder(catalog).decode(payload)

        assert exc_info.value.asset_name == "nope"
        assert exc_info.value.coding_path == (1, "options", 1, "image_name")
        assert "nope" in str(exc_info.value)

    def test_malformed_json_raises_decode_error(self):
        with pytest.raises(PostDecodeError) as exc_info:
            PostDecoder(MockAssetCatalog()).decode("[{not json")

        assert not isinstance(exc_info.value, DataCorruptedError)

    def test_missing_field_raises_decode_error(self):
        record = _record()
        del record["content"]

        with pytest.raises(PostDecodeError):
            PostDecoder(MockAssetCatalog()).decode(json.dumps([record]))

    def test_empty_list_decodes_to_no_posts(self):
        assert PostDecoder(MockAssetCatalog()).decode("[]") == []

    def test_option_image_without_image_name_raises_decode_error(self):
        record = _record()
        record["options"][0] = {
            "id": "post_1_option_1",
            "image": {"name": "does_not_exist"},
            "voted": 0,
        }

        with pytest.raises(PostDecodeError):
            PostDecoder(MockAssetCatalog(names=["img_b", "avatar_1"])).decode(
                json.dumps([record])
            )

    def test_missing_tally_raises_decode_error(self):
        record = _record()
        del record["options"][0]["voted"]

        with pytest.raises(PostDecodeError):
            PostDecoder(MockAssetCatalog()).decode(json.dumps([record]))

    def test_negative_tally_decodes(self):
        record = _record()
        record["options"][0]["voted"] = -1

        (post,) = PostDecoder(MockAssetCatalog()).decode(json.dumps([record]))

        assert post.options[0].voted == -1
        assert post.total_vote_count == 1

    def test_single_option_post_decodes(self):
        (post,) = PostDecoder(MockAssetCatalog()).decode(
            json.dumps([_record(option_images=("img_a",))])
        )

        assert [o.id for o in post.options] == ["post_1_option_1"]
