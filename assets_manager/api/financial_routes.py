"""
Financial particular endpoints.

Static paths are registered before ``/{entry_id}`` so they are not captured
as ids.
"""

from fastapi import APIRouter, Depends, status

from ..models.base import ResponseModel
from ..models.entry import EntryCreate, EntryUpdate
from ..models.user import UserAccount
from ..services.entry_service import EntryService
from .dependencies import get_current_user, get_entry_service

router = APIRouter(prefix="/financial", tags=["financial"])


@router.get("/all")
def list_entries(
    user: UserAccount = Depends(get_current_user),
    service: EntryService = Depends(get_entry_service),
) -> ResponseModel:
    entries = service.list_entries(user.id)
    return ResponseModel.success_response(
        data=[entry.model_dump(mode="json") for entry in entries],
        message=f"{len(entries)} financial particulars",
    )


@router.get("/stats")
def get_stats(
    user: UserAccount = Depends(get_current_user),
    service: EntryService = Depends(get_entry_service),
) -> ResponseModel:
    return ResponseModel.success_response(
        data=service.stats(user.id).model_dump(mode="json"),
        message="Financial statistics",
    )


@router.get("/titles")
def get_titles(
    user: UserAccount = Depends(get_current_user),
    service: EntryService = Depends(get_entry_service),
) -> ResponseModel:
    return ResponseModel.success_response(data=service.titles(user.id), message="Titles")


@router.delete("/clear-all")
def clear_all(
    user: UserAccount = Depends(get_current_user),
    service: EntryService = Depends(get_entry_service),
) -> ResponseModel:
    removed = service.clear_all(user.id)
    return ResponseModel.success_response(
        data={"deleted": removed},
        message="All financial data cleared successfully",
    )


@router.post("", status_code=status.HTTP_201_CREATED)
def create_entry(
    payload: EntryCreate,
    user: UserAccount = Depends(get_current_user),
    service: EntryService = Depends(get_entry_service),
) -> ResponseModel:
    entry = service.create_entry(user.id, payload)
    return ResponseModel.success_response(
        data=entry.model_dump(mode="json"),
        message="Financial particular created successfully",
    )


@router.get("/{entry_id}")
def get_entry(
    entry_id: str,
    user: UserAccount = Depends(get_current_user),
    service: EntryService = Depends(get_entry_service),
) -> ResponseModel:
    return ResponseModel.success_response(
        data=service.get_entry(user.id, entry_id).model_dump(mode="json"),
        message="Financial particular",
    )


@router.put("/{entry_id}")
def update_entry(
    entry_id: str,
    payload: EntryUpdate,
    user: UserAccount = Depends(get_current_user),
    service: EntryService = Depends(get_entry_service),
) -> ResponseModel:
    entry = service.update_entry(user.id, entry_id, payload)
    return ResponseModel.success_response(
        data=entry.model_dump(mode="json"),
        message="Financial particular updated successfully",
    )


@router.delete("/{entry_id}")
def delete_entry(
    entry_id: str,
    user: UserAccount = Depends(get_current_user),
    service: EntryService = Depends(get_entry_service),
) -> ResponseModel:
    deleted = service.delete_entry(user.id, entry_id)
    return ResponseModel.success_response(
        data={"id": entry_id, "deleted": deleted},
        message="Financial particular deleted successfully",
    )
