"""
Unit tests for infrastructure/content_repository.py
"""
import json

import pytest

from conftest import day_label, names
from core.models import SortingMethod
from core.services.sort_service import SortService
from infrastructure.content_repository import JsonContentRepository, to_json_dict


@pytest.fixture
def listing_path(tmp_path):
    path = tmp_path / "holiday.json"
    path.write_text(
        json.dumps(
            {
                "searchResult": True,
                "directories": [{"name": "b", "lastModified": 2}, {"name": "a"}, {"bad": 1}],
                "media": [
                    {"name": "p2.jpg", "creationDate": 5, "rating": 3, "faces": [{}, {}]},
                    {"name": "p1.jpg", "creationDate": 9, "associateCount": 1},
                    {"creationDate": 1},
                ],
                "markerFiles": [{"name": ".order_random.pg2conf"}],
            }
        ),
        encoding="utf-8",
    )
    return path


class TestJsonContentRepository:
    def test_load(self, listing_path):
        content = JsonContentRepository().load(listing_path)

        assert content.key == "holiday"
        assert content.is_search_result is True
        assert names(content.directories) == ["b", "a"]
        assert content.directories[1].last_modified == 0
        assert names(content.media) == ["p2.jpg", "p1.jpg"]
        assert content.media[0].associate_count == 2
        assert content.media[0].rating == 3
        assert content.media[1].associate_count == 1
        assert content.media[1].rating is None
        assert names(content.marker_files) == [".order_random.pg2conf"]

    def test_non_object_rejected(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(ValueError):
            JsonContentRepository().load(path)

    def test_save_grouped(self, listing_path, tmp_path):
        repo = JsonContentRepository()
        content = repo.load(listing_path)
        grouped = SortService(day_label).apply(
            content, SortingMethod.ASC_NAME, SortingMethod.DESC_RATING
        )
        out = tmp_path / "out" / "grouped.json"
        repo.save(out, grouped)

        data = json.loads(out.read_text(encoding="utf-8"))
        assert data == to_json_dict(grouped)
        assert data == {
            "directories": ["a", "b"],
            "mediaGroups": [
                {"name": "3", "media": ["p2.jpg"]},
                {"name": "0", "media": ["p1.jpg"]},
            ],
            "markerFiles": [".order_random.pg2conf"],
        }
