"""Tests for the payload normalization helpers."""

from __future__ import annotations

import pytest

from lastfmapi.platform.lastfm import normalize
from lastfmapi.platform.lastfm.models import Album, Artist, PageMeta, Track


def test_parse_images_orders_largest_first_and_drops_empty_urls() -> None:
    images = [
        {"#text": "https://img/s.png", "size": "small"},
        {"#text": "https://img/none.png", "size": ""},
        {"#text": "", "size": "mega"},
        {"#text": "https://img/xl.png", "size": "extralarge"},
        {"#text": "https://img/m.png", "size": "medium"},
        {"#text": "https://img/mega.png", "size": "mega"},
        {"#text": "https://img/l.png", "size": "large"},
    ]

    assert normalize.parse_images(images) == [
        "https://img/mega.png",
        "https://img/xl.png",
        "https://img/l.png",
        "https://img/m.png",
        "https://img/s.png",
        "https://img/none.png",
    ]


def test_parse_images_ranks_unknown_sizes_with_empty_size() -> None:
    images = [
        {"#text": "https://img/weird.png", "size": "gigantic"},
        {"#text": "https://img/blank.png"},
        {"#text": "https://img/s.png", "size": "small"},
    ]

    assert normalize.parse_images(images) == [
        "https://img/s.png",
        "https://img/weird.png",
        "https://img/blank.png",
    ]


@pytest.mark.parametrize("value", [None, "", "nope", 3, {"size": "small"}])
def test_parse_images_tolerates_malformed_input(value: object) -> None:
    assert normalize.parse_images(value) == []


def test_parse_meta_from_opensearch_fields() -> None:
    data = {
        "opensearch:totalResults": "30",
        "opensearch:itemsPerPage": "10",
        "opensearch:startIndex": "10",
    }

    meta = normalize.parse_meta(data, "cher")

    assert meta == PageMeta(query="cher", page=2, per_page=10, total=30, total_pages=3)


def test_parse_meta_rounds_total_pages_up() -> None:
    data = {
        "opensearch:totalResults": "31",
        "opensearch:itemsPerPage": "10",
        "opensearch:startIndex": "0",
    }

    meta = normalize.parse_meta(data)

    assert meta.page == 1
    assert meta.total_pages == 4


def test_parse_meta_zero_per_page_does_not_divide() -> None:
    data = {"opensearch:totalResults": "5", "opensearch:itemsPerPage": "0"}

    meta = normalize.parse_meta(data, "q")

    assert meta.per_page == 0
    assert meta.total_pages == 0
    assert meta.page == 1


def test_parse_meta_from_attr_fields() -> None:
    data = {
        "album": [],
        "@attr": {"artist": "Cher", "page": "3", "perPage": "50", "total": "1234", "totalPages": "25"},
    }

    meta = normalize.parse_meta(data, "Cher")

    assert meta == PageMeta(query="Cher", page=3, per_page=50, total=1234, total_pages=25)


def test_parse_meta_without_any_metadata_starts_at_page_one() -> None:
    assert normalize.parse_meta({}, None) == PageMeta(
        query=None, page=1, per_page=0, total=0, total_pages=0
    )


def test_parse_summary_strips_read_more_anchor() -> None:
    text = (
        'Cher is an American singer. <a href="https://www.last.fm/music/Cher">'
        "Read more on Last.fm</a>. User-contributed text is available under the "
        "Creative Commons By-SA License; additional terms may apply."
    )

    assert normalize.parse_summary(text) == "Cher is an American singer."


def test_parse_summary_leaves_plain_text_unchanged() -> None:
    text = "A summary without any link.\nSecond line. "

    assert normalize.parse_summary(text) == text


def test_parse_summary_handles_missing_text() -> None:
    assert normalize.parse_summary(None) == ""


def test_parse_tags_flattens_names_in_order() -> None:
    container = {"tag": [{"name": "pop", "url": "u1"}, {"name": "dance"}, {"url": "nameless"}]}

    assert normalize.parse_tags(container) == ["pop", "dance"]


def test_parse_tags_accepts_single_tag_object() -> None:
    assert normalize.parse_tags({"tag": {"name": "rock"}}) == ["rock"]


@pytest.mark.parametrize("container", [None, "", {"tag": "x"}, {}])
def test_parse_tags_tolerates_empty_containers(container: object) -> None:
    assert normalize.parse_tags(container) == []


def test_parse_artists_coerces_listeners_and_flattens_images() -> None:
    entries = [
        {
            "name": "Cher",
            "listeners": "1500",
            "image": [
                {"#text": "https://img/s.png", "size": "small"},
                {"#text": "https://img/l.png", "size": "large"},
            ],
        }
    ]

    assert normalize.parse_artists(entries) == [
        Artist(name="Cher", listeners=1500, images=("https://img/l.png", "https://img/s.png"))
    ]


def test_parse_artists_applies_listener_threshold() -> None:
    entries = [
        {"name": "Small", "listeners": "500"},
        {"name": "Big", "listeners": "1500"},
        {"name": "Unknown"},
    ]

    names = [artist.name for artist in normalize.parse_artists(entries, min_listeners=1000)]

    assert names == ["Big"]


def test_parse_artists_zero_threshold_keeps_everything() -> None:
    entries = [{"name": "Small", "listeners": "5"}, {"name": "Unknown"}]

    artists = normalize.parse_artists(entries, min_listeners=0)

    assert [artist.name for artist in artists] == ["Small", "Unknown"]
    assert artists[1].listeners is None


def test_parse_tracks_reads_artist_as_string_or_object() -> None:
    entries = [
        {"name": "Believe", "artist": "Cher", "listeners": "900", "duration": "240"},
        {"name": "Strong Enough", "artist": {"name": "Cher", "mbid": ""}},
        {"name": "Recent", "artist": {"#text": "Cher"}},
    ]

    tracks = normalize.parse_tracks(entries)

    assert tracks[0] == Track(name="Believe", artist_name="Cher", duration=240, listeners=900)
    assert tracks[1].artist_name == "Cher"
    assert tracks[1].duration is None
    assert tracks[2].artist_name == "Cher"


def test_parse_tracks_falls_back_to_given_artist_and_filters() -> None:
    entries = [
        {"name": "A", "listeners": "10"},
        {"name": "B", "listeners": "5000"},
    ]

    tracks = normalize.parse_tracks(entries, min_listeners=100, artist_name="Cher")

    assert tracks == [Track(name="B", artist_name="Cher", listeners=5000)]


def test_parse_albums_has_no_threshold_and_optional_listeners() -> None:
    entries = {"name": "Believe", "artist": "Cher"}

    assert normalize.parse_albums(entries) == [Album(name="Believe", artist_name="Cher")]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("12", 12), ("12.0", 12), (7, 7), (3.9, 3), ("", None), ("abc", None), (None, None), (True, None)],
)
def test_to_int(raw: object, expected: int | None) -> None:
    assert normalize.to_int(raw) == expected
