"""FilmController tests: CRUD, search/pagination and category association.

Invariants:
    - add_film then get_film returns exactly the submitted fields under a fresh id
    - Search is a case-insensitive substring match over name and description
    - update_film is a full replace: omitted description/rating become None
    - add_category_to_film appends once and rejects the duplicate
    - Only the film side of the association is written
"""

import pytest
from pymongo.errors import PyMongoError

from app.schemas import FilmUpdate
from app.utils.exceptions import (
    ConcurrentUpdateError,
    DuplicateAssociationError,
    FilmNotFoundError,
    RetrievalError,
)


# --- add / get ----------------------------------------------------------------

async def test_add_then_get_returns_same_fields(film_controller, make_film):
    created = await make_film(category_ids=["cat_a", "cat_b"])

    fetched = await film_controller.get_film(created.film_id)

    assert fetched is not None
    assert fetched.film_id == created.film_id
    assert fetched.name == "Inception"
    assert fetched.description == "A thriller about dreams."
    assert fetched.release_date.isoformat() == "2010-07-16"
    assert fetched.rating == 5
    assert fetched.categories == ["cat_a", "cat_b"]


async def test_add_assigns_distinct_ids(make_film):
    first = await make_film()
    second = await make_film()
    third = await make_film(name="Interstellar")

    assert len({first.film_id, second.film_id, third.film_id}) == 3


async def test_add_without_rating_stores_none(film_controller, make_film):
    created = await make_film(rating=None)

    fetched = await film_controller.get_film(created.film_id)
    assert fetched.rating is None


async def test_get_unknown_film_returns_none(film_controller):
    assert await film_controller.get_film("film_missing") is None


# --- list: search ---------------------------------------------------------------

async def test_search_matches_exact_name_only(film_controller, make_film):
    await make_film(name="Inception", description="Dreams within dreams.")
    await make_film(name="Interstellar", description="Beyond the stars.")
    await make_film(name="The Dark Knight", description="Batman fights the Joker.")

    page = await film_controller.list_films(search="Inception")

    assert page.total == 1
    assert [f.name for f in page.films] == ["Inception"]


async def test_search_is_case_insensitive_substring(film_controller, make_film):
    await make_film(name="Inception")
    await make_film(name="Interstellar", description="Beyond the stars.")

    page = await film_controller.list_films(search="incep")

    assert [f.name for f in page.films] == ["Inception"]


async def test_search_matches_description(film_controller, make_film):
    await make_film(name="The Dark Knight", description="Batman fights the Joker in Gotham.")
    await make_film(name="Interstellar", description="Beyond the stars.")

    page = await film_controller.list_films(search="GOTHAM")

    assert [f.name for f in page.films] == ["The Dark Knight"]


async def test_search_treats_regex_characters_literally(film_controller, make_film):
    await make_film(name="Film (1999)")
    await make_film(name="Film 1999")

    page = await film_controller.list_films(search="(1999)")

    assert [f.name for f in page.films] == ["Film (1999)"]


async def test_search_link_carries_term(film_controller, make_film):
    await make_film()

    page = await film_controller.list_films(search="incep", page=1, limit=5)

    assert page.links.self_link.href == "/api/films?search=incep&page=1&limit=5"


# --- list: pagination ------------------------------------------------------------

async def test_second_page_of_three(film_controller, make_film):
    await make_film(name="Inception")
    await make_film(name="Interstellar")
    await make_film(name="The Dark Knight")

    page = await film_controller.list_films(page=2, limit=1)

    assert [f.name for f in page.films] == ["Interstellar"]
    assert page.total == 3
    assert page.page == 2
    assert page.total_pages == 3
    assert page.links.prev.href == "/api/films?page=1&limit=1"
    assert page.links.next.href == "/api/films?page=3&limit=1"


async def test_first_page_has_no_prev_link(film_controller, make_film):
    await make_film()

    page = await film_controller.list_films()

    assert page.links.prev is None
    assert page.links.self_link.href == "/api/films?page=1&limit=10"
    assert page.links.next.href == "/api/films?page=2&limit=10"


async def test_page_past_end_is_empty_with_next_link(film_controller, make_film):
    await make_film()
    await make_film()

    page = await film_controller.list_films(page=5, limit=1)

    assert page.films == []
    assert page.total == 2
    assert page.total_pages == 2
    assert page.links.next.href == "/api/films?page=6&limit=1"


async def test_empty_catalog_has_zero_pages(film_controller):
    page = await film_controller.list_films()

    assert page.total == 0
    assert page.total_pages == 0
    assert page.films == []


async def test_total_pages_rounds_up(film_controller, make_film):
    for _ in range(5):
        await make_film()

    page = await film_controller.list_films(limit=2)

    assert page.total_pages == 3
    assert len(page.films) == 2


# --- list: category resolution and links ---------------------------------------

async def test_listing_resolves_categories_and_links(film_controller, make_film, make_category):
    scifi = await make_category(name="Science Fiction")
    thriller = await make_category(name="Thriller", description="Tense films.")
    film = await make_film(category_ids=[thriller.category_id, scifi.category_id])

    page = await film_controller.list_films()
    entry = page.films[0]

    assert [c.name for c in entry.categories] == ["Thriller", "Science Fiction"]
    assert entry.links.self_link.href == f"/api/films/{film.film_id}"
    assert [link.href for link in entry.links.categories] == [
        f"/api/categories/{thriller.category_id}",
        f"/api/categories/{scifi.category_id}",
    ]


async def test_listing_drops_unknown_category_ids(film_controller, make_film, make_category):
    scifi = await make_category()
    await make_film(category_ids=["cat_gone", scifi.category_id])

    page = await film_controller.list_films()

    assert [c.category_id for c in page.films[0].categories] == [scifi.category_id]


async def test_store_failure_raises_retrieval_error(film_controller, monkeypatch):
    async def _broken_count(search):
        raise PyMongoError("connection reset")

    monkeypatch.setattr(film_controller.film_repo, "count", _broken_count)

    with pytest.raises(RetrievalError) as exc_info:
        await film_controller.list_films()

    assert "connection reset" in str(exc_info.value)
    assert isinstance(exc_info.value.cause, PyMongoError)


# --- update (full replace) -------------------------------------------------------

async def test_update_replaces_all_fields(film_controller, make_film):
    film = await make_film()

    updated = await film_controller.update_film(film.film_id, FilmUpdate(
        name="Inception (Director's Cut)",
        description="Longer dreams.",
        release_date="2011-01-01",
        rating=4,
    ))

    assert updated.name == "Inception (Director's Cut)"
    assert updated.description == "Longer dreams."
    assert updated.release_date.isoformat() == "2011-01-01"
    assert updated.rating == 4


async def test_update_without_description_clears_it(film_controller, make_film):
    """Full replace, unlike the category partial merge: omitted means erased."""
    film = await make_film(description="A thriller about dreams.")

    updated = await film_controller.update_film(film.film_id, FilmUpdate(
        name="Inception",
        release_date="2010-07-16",
        rating=5,
    ))
    fetched = await film_controller.get_film(film.film_id)

    assert updated.description is None
    assert fetched.description is None


async def test_update_keeps_category_list(film_controller, make_film):
    film = await make_film(category_ids=["cat_a"])

    updated = await film_controller.update_film(film.film_id, FilmUpdate(
        name="Inception", release_date="2010-07-16",
    ))

    assert updated.categories == ["cat_a"]


async def test_update_bumps_version(film_controller, make_film):
    film = await make_film()

    updated = await film_controller.update_film(film.film_id, FilmUpdate(
        name="Inception", release_date="2010-07-16",
    ))

    assert updated.version == film.version + 1


async def test_update_unknown_film_returns_none(film_controller):
    result = await film_controller.update_film("film_missing", FilmUpdate(
        name="Nothing", release_date="2000-01-01",
    ))
    assert result is None


# --- delete --------------------------------------------------------------------

async def test_delete_returns_removed_film(film_controller, make_film):
    film = await make_film()

    removed = await film_controller.delete_film(film.film_id)

    assert removed.film_id == film.film_id
    assert await film_controller.get_film(film.film_id) is None


async def test_delete_unknown_film_returns_none(film_controller):
    assert await film_controller.delete_film("film_missing") is None


# --- add_category_to_film --------------------------------------------------------

async def test_add_category_twice_keeps_single_entry(film_controller, make_film):
    film = await make_film()

    updated = await film_controller.add_category_to_film(film.film_id, "cat_1")
    assert updated.categories == ["cat_1"]

    with pytest.raises(DuplicateAssociationError):
        await film_controller.add_category_to_film(film.film_id, "cat_1")

    fetched = await film_controller.get_film(film.film_id)
    assert fetched.categories.count("cat_1") == 1


async def test_add_category_to_unknown_film_raises(film_controller):
    with pytest.raises(FilmNotFoundError):
        await film_controller.add_category_to_film("film_missing", "cat_1")


async def test_add_category_leaves_category_side_untouched(
    film_controller, category_controller, make_film, make_category
):
    film = await make_film()
    category = await make_category()

    await film_controller.add_category_to_film(film.film_id, category.category_id)

    fetched = await category_controller.get_category(category.category_id)
    assert fetched.films == []


async def test_add_category_rejects_stale_film(film_controller, film_repo, make_film, monkeypatch):
    film = await make_film()
    stale = await film_repo.get_by_id(film.film_id)
    await film_controller.add_category_to_film(film.film_id, "cat_first")

    async def _return_stale(film_id):
        return stale

    monkeypatch.setattr(film_repo, "get_by_id", _return_stale)

    with pytest.raises(ConcurrentUpdateError):
        await film_controller.add_category_to_film(film.film_id, "cat_second")
