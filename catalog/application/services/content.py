import catalog.domain.models as dmod
import catalog.domain.exceptions as domexc
import catalog.presentation.schemas as schemas

__all__ = ['REQUIRED_CONTENT_FIELDS', 'validate_content']

REQUIRED_CONTENT_FIELDS = {
    'title': 'Title is required',
    'type': 'Art type is required',
    'description': 'Description is required',
}


def validate_content(data: schemas.ArtworkInputModel) -> dmod.ArtworkContent:
    """Checks every required field before failing, then fills in defaults for the optional ones."""
    fields = {k: v.strip() for k, v in data.model_dump(exclude_none=True).items()}
    errors = [message for name, message in REQUIRED_CONTENT_FIELDS.items() if not fields.get(name)]
    if errors:
        raise domexc.ValidationError(errors)
    if not fields.get('artist'):
        fields.pop('artist', None)
    return dmod.ArtworkContent(**fields)
