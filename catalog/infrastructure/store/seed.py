import catalog.infrastructure.interfaces as iabc
import catalog.infrastructure.exceptions as infexc
import catalog.domain.models as dmod
import catalog.domain.services as domsvc
from catalog.common.config import Config
import logging

logger = logging.getLogger('catalog.storage')

__all__ = ['default_artworks', 'default_submissions', 'default_categories', 'seed_default_data']


def default_artworks() -> list[dmod.Artwork]:
    return [
        dmod.Artwork(
            id=1,
            title='Ancient Cave Painting',
            type='Rock Art',
            artist='Unknown',
            period='c. 5000 BCE',
            description='Ancient cave paintings depicting hunting scenes and daily life of indigenous people.',
            location='Northern Territory, Australia',
            image_url='https://picsum.photos/seed/1/400/300',
            condition_note='Well preserved with minor weathering.',
            submitted_by=2,
        ),
        dmod.Artwork(
            id=2,
            title='Traditional Pottery Vessel',
            type='Pottery',
            artist='Maria Santos',
            period='c. 1800 CE',
            description='Ceremonial pottery vessel with traditional geometric patterns.',
            location='Southwestern United States',
            image_url='https://picsum.photos/seed/2/400/300',
            condition_note='Excellent condition with original pigments intact.',
            submitted_by=2,
        ),
    ]

def default_submissions() -> list[dmod.Submission]:
    return [
        dmod.Submission(
            id=1,
            title='New Rock Art Discovery',
            type='Rock Art',
            artist='Unknown',
            period='c. 3000 BCE',
            description='Recently discovered rock art showing animal figures.',
            location='Central Australia',
            image_url='https://picsum.photos/seed/3/400/300',
            condition_note='Good condition, needs documentation.',
            submitted_by=2,
        ),
    ]

def default_categories() -> list[dmod.Category]:
    return [
        dmod.Category(id=1, name='Rock Art', description='Ancient paintings and engravings on rock surfaces'),
        dmod.Category(id=2, name='Pottery', description='Traditional ceramic vessels and decorative items'),
        dmod.Category(id=3, name='Textile', description='Woven materials, clothing, and fabric art'),
    ]

async def default_users(hasher: domsvc.IPasswordHasherAsync) -> list[dmod.User]:
    admin = await dmod.User.create(
        username=Config.DEFAULT_ADMIN_USERNAME,
        email=Config.DEFAULT_ADMIN_EMAIL,
        password=Config.DEFAULT_ADMIN_PASSWORD,
        role=dmod.Role.ADMIN,
        hasher=hasher,
    )
    user = await dmod.User.create(
        username='user1',
        email='user1@example.com',
        password='user123',
        role=dmod.Role.GENERAL,
        hasher=hasher,
    )
    admin.id, user.id = 1, 2
    return [admin, user]


async def seed_default_data(store: iabc.IRecordStore, hasher: domsvc.IPasswordHasherAsync) -> list[str]:
    """Creates every missing collection document with the starter catalog. Existing documents are never touched.
    Returns names of the collections that were created."""
    seeded = []
    defaults = {
        'artworks': lambda: [a.model_dump(mode='json') for a in default_artworks()],
        'submissions': lambda: [s.model_dump(mode='json') for s in default_submissions()],
        'categories': lambda: [c.model_dump(mode='json') for c in default_categories()],
    }
    if not store.exists('users'):
        users = await default_users(hasher)
        defaults['users'] = lambda: [u.to_record() for u in users]

    for collection, build in defaults.items():
        async with store.lock(collection):
            if store.exists(collection):
                continue
            if not await store.save(collection, build()):
                raise infexc.StorageFailure(f"Failed to seed '{collection}'")
            seeded.append(collection)
            logger.info(f"[STORAGE: Seed] '{collection}' created with default data")
    return seeded
