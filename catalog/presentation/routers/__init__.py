from .auth import router as AuthRouter
from .artworks import router as ArtworkRouter
from .submissions import router as SubmissionRouter
from .admin import router as AdminRouter
