#Fastapi
from fastapi import APIRouter, Path, status

#Project files
import catalog.application.dependencies as deps
import catalog.presentation.schemas as schemas
#Typing
import typing as t

import logging
logger = logging.getLogger('catalog')


########################################
#                Setup                 #
########################################

router = APIRouter(
    prefix="/admin",
    tags = ["admin"],
    responses={
        401: {"description": "Not authenticated"},
        403: {"description": "Returned when NON-Admin accesses this endpoint"},
    }
    )


@router.get('/stats')
async def get_stats(query_service: deps.QueryServiceDependency, admin_id: deps.AdminIdDependency) -> schemas.StatsDTO:
    return await query_service.stats()


########################################
#               USERS                  #
########################################

@router.get('/users')
async def get_users(user_service: deps.UserServiceDependency, admin_id: deps.AdminIdDependency) -> schemas.UserList:
    return schemas.UserList(users=await user_service.list())


@router.put('/users/{user_id}/role', responses={400: {"description":"Unknown role"}, 404: {"description":"No such user"}})
async def update_user_role(
        user_service: deps.UserServiceDependency,
        admin_id: deps.AdminIdDependency,
        user_id: t.Annotated[int, Path(description='id of a user to edit')],
        data: schemas.RoleUpdateModel,
    ) -> schemas.UserDTO:
    return await user_service.update_role(admin_id, user_id, data.role)


@router.put('/users/{user_id}/status', responses={400: {"description":"Unknown status"}, 404: {"description":"No such user"}})
async def update_user_status(
        user_service: deps.UserServiceDependency,
        admin_id: deps.AdminIdDependency,
        user_id: t.Annotated[int, Path(description='id of a user to edit')],
        data: schemas.StatusUpdateModel,
    ) -> schemas.UserDTO:
    return await user_service.update_status(admin_id, user_id, data.status)


########################################
#             MODERATION               #
########################################

@router.put('/submissions/{submission_id}', responses={
    404: {"description":"No such submission"},
    409: {"description":"Status change is not permitted"},
    })
async def set_submission_status(
        moderation_service: deps.ModerationServiceDependency,
        admin_id: deps.AdminIdDependency,
        submission_id: t.Annotated[int, Path(description='Submission to moderate')],
        data: schemas.StatusChangeModel,
    ) -> schemas.ModerationResult:
    return await moderation_service.set_status(admin_id, submission_id, data.status)


@router.post('/artworks', status_code=status.HTTP_201_CREATED)
async def import_artwork(
        moderation_service: deps.ModerationServiceDependency,
        admin_id: deps.AdminIdDependency,
        data: schemas.ArtworkInputModel,
    ) -> schemas.ArtworkDTO:
    return await moderation_service.import_artwork(admin_id, data)


########################################
#             CATEGORIES               #
########################################

@router.post('/categories', status_code=status.HTTP_201_CREATED, responses={409: {"description":"Name already taken"}})
async def create_category(
        category_service: deps.CategoryServiceDependency,
        admin_id: deps.AdminIdDependency,
        data: schemas.CategoryCreationModel,
    ) -> schemas.CategoryDTO:
    return await category_service.create(data)


@router.delete('/categories/{category_id}', responses={404: {"description":"No such category"}})
async def delete_category(
        category_service: deps.CategoryServiceDependency,
        admin_id: deps.AdminIdDependency,
        category_id: t.Annotated[int, Path()],
    ) -> schemas.MessageResponse:
    await category_service.delete(category_id)
    return schemas.MessageResponse(message='Category deleted successfully')
