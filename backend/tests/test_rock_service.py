"""
Rocks API — Rock Service Unit Tests
=====================================

What:  Tests for RockService listing, indexing and echo (no HTTP).
"""

import pytest

from rocks_api.exceptions import NotFoundError, RockNotFoundError
from rocks_api.models.rocks import ROCKS
from rocks_api.services.rock_service import RockService, rock_service as default_service


class TestListRocks:

    def test_list_returns_collection_in_order(self, rock_service):
        assert rock_service.list_rocks() == ["granite", "basalt", "obsidian"]

    def test_list_returns_a_copy(self, rock_service):
        """Mutating the returned list must not affect later calls."""
        rocks = rock_service.list_rocks()
        rocks.append("pumice")

        assert rock_service.list_rocks() == ["granite", "basalt", "obsidian"]

    def test_default_service_uses_module_collection(self):
        assert default_service.list_rocks() == list(ROCKS)


class TestGetRock:

    def test_first_and_last(self, rock_service):
        assert rock_service.get_rock("0") == "granite"
        assert rock_service.get_rock("2") == "obsidian"

    def test_leading_zeros_accepted(self, rock_service):
        assert rock_service.get_rock("01") == "basalt"

    @pytest.mark.parametrize("index", ["3", "100", "-1", "", "abc", "1.0", " 1", "²"])
    def test_invalid_index_raises(self, rock_service, index):
        with pytest.raises(RockNotFoundError) as exc_info:
            rock_service.get_rock(index)

        assert exc_info.value.index == index
        assert exc_info.value.context["valid_range"] == "0..2"

    def test_rock_not_found_is_a_not_found_error(self, rock_service):
        """Global handlers map NotFoundError subclasses to 404."""
        with pytest.raises(NotFoundError):
            rock_service.get_rock("9")

    def test_empty_collection(self):
        service = RockService([])

        with pytest.raises(RockNotFoundError) as exc_info:
            service.get_rock("0")

        assert exc_info.value.context["valid_range"] == "empty"


class TestDescribe:

    def test_describe_echoes_strings(self, rock_service):
        params = rock_service.describe("2", "basalt")

        assert params.model_dump() == {"index": "2", "name": "basalt"}
