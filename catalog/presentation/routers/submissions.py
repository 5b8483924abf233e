#Fastapi
from fastapi import APIRouter, Query, status

#Project files
import catalog.application.dependencies as deps
import catalog.presentation.schemas as schemas
#Typing
import typing as t


router = APIRouter(
    prefix="/submissions",
    tags = ["submissions"],
    responses={401: {"description": "Not authenticated"}}
    )


@router.post('', status_code=status.HTTP_201_CREATED, responses={
    400: {"description":"Title, type or description missing"},
    })
async def create_submission(
        moderation_service: deps.ModerationServiceDependency,
        user_id: deps.UserIdDependency,
        data: schemas.ArtworkInputModel,
    ) -> schemas.SubmissionDTO:
    return await moderation_service.create_submission(user_id, data)


@router.get('', description="Admins get every submission, other users only their own")
async def list_submissions(
        query_service: deps.QueryServiceDependency,
        session: deps.CurrentSessionDependency,
        status: t.Annotated[str | None, Query(description='pending, approved or rejected')] = None,
    ) -> schemas.SubmissionList:
    return await query_service.list_submissions(session, status)
