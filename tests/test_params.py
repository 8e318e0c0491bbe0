from __future__ import annotations

import pytest

from brogue_scanner.cli import build_parser
from brogue_scanner.data import FileFormat
from brogue_scanner.objects import Category
from brogue_scanner.search import (
    CountType,
    MatchResponse,
    ObjectParameter,
    SearchParameters,
    SearchStatus,
)


def _armor(**kwargs) -> ObjectParameter:
    return ObjectParameter(Category.ARMOR, kind="scale", **kwargs)


@pytest.mark.parametrize(
    "count_type, target, count, valid",
    [
        (CountType.AT_LEAST, 2, 1, False),
        (CountType.AT_LEAST, 2, 2, True),
        (CountType.AT_LEAST, 2, 5, True),
        (CountType.LESS_THAN, 2, 0, True),
        (CountType.LESS_THAN, 2, 2, False),
        (CountType.EQUAL_TO, 2, 2, True),
        (CountType.EQUAL_TO, 2, 3, False),
    ],
)
def test_object_parameter_validity(count_type, target, count, valid):
    param = _armor(count_target=target, count_type=count_type)
    param.count = count
    assert param.is_valid() is valid
    param.clear()
    assert param.count == 0


@pytest.mark.parametrize(
    "count_type, count, response",
    [
        (CountType.AT_LEAST, 2, MatchResponse.INCREMENT),
        (CountType.AT_LEAST, 3, MatchResponse.DO_NOTHING),
        (CountType.LESS_THAN, 1, MatchResponse.INCREMENT),
        (CountType.LESS_THAN, 2, MatchResponse.EARLY_EXIT),
        (CountType.EQUAL_TO, 2, MatchResponse.INCREMENT),
        (CountType.EQUAL_TO, 3, MatchResponse.EARLY_EXIT),
    ],
)
def test_match_responses(count_type, count, response):
    param = _armor(count_target=2, count_type=count_type)
    param.count = count
    assert param.respond() is response


def test_running_count_is_ignored_by_equality():
    a, b = _armor(), _armor()
    a.count = 4
    assert a == b


def test_search_status():
    param = _armor(count_target=1)
    params = SearchParameters(object_params=[param])
    assert params.search_status(MatchResponse.INCREMENT) is SearchStatus.IN_PROGRESS
    param.count = 1
    assert params.search_status(MatchResponse.INCREMENT) is SearchStatus.ALL_OBJECTS_FOUND
    assert params.search_status(MatchResponse.EARLY_EXIT) is SearchStatus.EARLY_SEED_EXIT


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"depth_min": 0}, "--mindepth must be from 1 to 26"),
        ({"depth_max": 27}, "--maxdepth must be from 1 to 26"),
        ({"depth_min": 5, "depth_max": 4}, "--mindepth cannot be greater than --maxdepth"),
        ({"matches_max": 0}, "--matches must be from 1 to 255"),
        ({"matches_max": 256}, "--matches must be from 1 to 255"),
        ({"seed_min": 0}, "--minseed must be from 1 to 4294967295"),
        ({"seed_max": 4294967296}, "--maxseed must be from 1 to 4294967295"),
        ({"seed_min": 10, "seed_max": 9}, "--minseed cannot be greater than --maxseed"),
    ],
)
def test_general_bounds(kwargs, message):
    with pytest.raises(ValueError, match=message):
        SearchParameters(object_params=[_armor()], **kwargs)


def test_duplicates_and_empty_searches_are_rejected():
    with pytest.raises(ValueError, match="Duplicate parameters detected"):
        SearchParameters(object_params=[_armor(), _armor()])
    with pytest.raises(ValueError, match="No object search terms given"):
        SearchParameters(object_params=[])


def test_from_args_uses_settings_and_overrides(utf16_catalog, settings):
    settings.update(depth_max=12, matches_max=3)
    args = build_parser().parse_args(
        ["-F", str(utf16_catalog.parent), "--mindepth", "2", "--start", "5", "-vv", "-a", "scale"]
    )
    params = SearchParameters.from_args(args, settings)

    assert (params.depth_min, params.depth_max) == (2, 12)
    assert (params.seed_min, params.seed_max) == (5, 4294967295)
    assert params.matches_max == 3
    assert params.verbosity == 2
    assert params.format is FileFormat.UTF16
    assert params.file_paths == [utf16_catalog]


@pytest.mark.parametrize("flags, verbosity", [([], 3), (["-v"], 1), (["-vv"], 2), (["-vvv"], 3)])
def test_verbosity_levels(utf16_catalog, settings, flags, verbosity):
    args = build_parser().parse_args(["-F", str(utf16_catalog.parent), *flags, "-a", "scale"])
    assert SearchParameters.from_args(args, settings).verbosity == verbosity


def test_random_order_keeps_every_file(split_catalogs, settings):
    args = build_parser().parse_args(["-F", str(split_catalogs), "-R", "-a", "scale"])
    params = SearchParameters.from_args(args, settings)
    assert sorted(params.file_paths) == sorted(split_catalogs.iterdir())


def test_summary_text():
    params = SearchParameters(
        object_params=[
            ObjectParameter(Category.WEAPON, count_target=2, depth=6, enchantment=3, runic="paralysis"),
            ObjectParameter(Category.POTION, count_type=CountType.LESS_THAN, kind="descent"),
        ],
        matches_max=5,
    )
    text = str(params)
    assert text.startswith("Search:\n")
    assert "   matches: 5" in text
    assert "Objects:" in text
    assert "  category: weapon" in text
    assert "     count: 2 or more" in text
    assert "     depth: 6 or less" in text
    assert "      ench: +3 or more" in text
    assert "     runic: paralysis" in text
    assert "     count: less than 1" in text
    assert "      kind: descent" in text
