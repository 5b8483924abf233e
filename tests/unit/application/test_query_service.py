import pytest
import catalog.application.services as svc
import catalog.application.models as mapp
import catalog.domain.exceptions as domexc
import catalog.domain.models as dmod
from tests.helpers.catalog import artwork, submission


def viewer(user_id: int, role=dmod.Role.GENERAL) -> mapp.UserSession:
    return mapp.UserSession(user_id=user_id, username=f'user{user_id}', role=role)


@pytest.mark.asyncio
async def test_search_seeded_catalog(seeded_store, query_service: svc.QueryService):
    result = await query_service.search('cave')
    assert [a.title for a in result.artworks] == ['Ancient Cave Painting']

    result = await query_service.search('CAVE')
    assert len(result.artworks) == 1

    result = await query_service.search('maria')
    assert [a.title for a in result.artworks] == ['Traditional Pottery Vessel']

    result = await query_service.search('')
    assert len(result.artworks) == 2


@pytest.mark.asyncio
@pytest.mark.parametrize(
   "query, type, period, expected",
   [
       ('', 'Pottery', None, ['Traditional Pottery Vessel']),
       ('', 'pottery', None, []),
       ('', None, 'bce', ['Ancient Cave Painting']),
       ('ancient', 'Pottery', None, []),
       ('nothing matches this', None, None, []),
   ],
)
async def test_search_filters(seeded_store, query_service: svc.QueryService, query, type, period, expected):
    result = await query_service.search(query, type, period)
    assert [a.title for a in result.artworks] == expected


@pytest.mark.asyncio
async def test_list_approved_seeded(seeded_store, query_service: svc.QueryService):
    page = await query_service.list_approved(1, 9)
    assert len(page.artworks) == 2
    assert page.pagination.current_page == 1
    assert page.pagination.total_pages == 1
    assert page.pagination.total_items == 2
    assert page.pagination.per_page == 9


@pytest.mark.asyncio
@pytest.mark.parametrize(
   "page, page_size, expected_ids, total_pages",
   [
       (1, 2, [1, 2], 3),
       (3, 2, [5], 3),
       (4, 2, [], 3),
       (1, 10, [1, 2, 3, 4, 5], 1),
   ],
)
async def test_list_approved_pages(artwork_repo, query_service: svc.QueryService, page, page_size, expected_ids, total_pages):
    for i in range(5):
        await artwork_repo.create(artwork(title=f'Piece {i}'))
    result = await query_service.list_approved(page, page_size)
    assert [a.id for a in result.artworks] == expected_ids
    assert result.pagination.total_pages == total_pages
    assert result.pagination.total_items == 5


@pytest.mark.asyncio
async def test_empty_catalog_has_no_pages(query_service: svc.QueryService):
    result = await query_service.list_approved(1, 9)
    assert result.artworks == []
    assert result.pagination.total_pages == 0


@pytest.mark.asyncio
async def test_unapproved_artworks_are_hidden(artwork_repo, query_service: svc.QueryService):
    await artwork_repo.create(artwork(title='Visible'))
    hidden = await artwork_repo.create(artwork(title='Hidden', status=dmod.ModerationStatus.PENDING))

    page = await query_service.list_approved(1, 9)
    assert [a.title for a in page.artworks] == ['Visible']
    assert (await query_service.search('hidden')).artworks == []
    with pytest.raises(domexc.ArtworkDoesNotExist):
        await query_service.get_with_similar(hidden.id)


@pytest.mark.asyncio
async def test_similar_artworks(artwork_repo, query_service: svc.QueryService):
    target = await artwork_repo.create(artwork(title='Target', type='Textile'))
    for i in range(4):
        await artwork_repo.create(artwork(title=f'Textile {i}', type='Textile'))
    await artwork_repo.create(artwork(title='Bowl', type='Pottery'))

    detail = await query_service.get_with_similar(target.id)
    assert detail.artwork.id == target.id
    assert len(detail.similar) == 3
    assert all(a.type == 'Textile' and a.id != target.id for a in detail.similar)


@pytest.mark.asyncio
async def test_similar_for_only_artwork_of_its_type(seeded_store, query_service: svc.QueryService):
    detail = await query_service.get_with_similar(1)
    assert detail.artwork.title == 'Ancient Cave Painting'
    assert detail.similar == []


@pytest.mark.asyncio
async def test_missing_artwork(query_service: svc.QueryService):
    with pytest.raises(domexc.ArtworkDoesNotExist, match='Artwork not found'):
        await query_service.get_with_similar(404)


@pytest.mark.asyncio
async def test_submission_visibility(submission_repo, query_service: svc.QueryService):
    await submission_repo.create(submission(submitted_by=2, title='Mine'))
    await submission_repo.create(submission(submitted_by=3, title='Theirs'))

    own = await query_service.list_submissions(viewer(2))
    assert [s.title for s in own.submissions] == ['Mine']

    everything = await query_service.list_submissions(viewer(1, dmod.Role.ADMIN))
    assert [s.title for s in everything.submissions] == ['Mine', 'Theirs']

    researcher = await query_service.list_submissions(viewer(9, dmod.Role.RESEARCHER))
    assert researcher.submissions == []


@pytest.mark.asyncio
async def test_submission_status_filter(seeded_store, query_service: svc.QueryService):
    admin = viewer(1, dmod.Role.ADMIN)
    assert len((await query_service.list_submissions(admin, 'pending')).submissions) == 1
    assert (await query_service.list_submissions(admin, 'approved')).submissions == []
    with pytest.raises(domexc.ValidationError):
        await query_service.list_submissions(admin, 'archived')


@pytest.mark.asyncio
async def test_stats(seeded_store, query_service: svc.QueryService, moderation_service: svc.ModerationService):
    stats = await query_service.stats()
    assert (stats.pending_submissions, stats.total_users, stats.total_artworks) == (1, 2, 2)

    await moderation_service.set_status(1, 1, 'approved')
    stats = await query_service.stats()
    assert (stats.pending_submissions, stats.total_users, stats.total_artworks) == (0, 2, 3)
