"""Endpoints editing the sample words file."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from app.api import deps
from app.schemas import (
    SampleWordCreate,
    SampleWordListResponse,
    SampleWordResponse,
    SampleWordUpdate,
)
from app.services.sample_words import SampleWordStore

router = APIRouter(prefix="/sample-words", tags=["sample-words"])


@router.get("", response_model=SampleWordListResponse, response_model_exclude_none=True)
def list_sample_words(
    store: SampleWordStore = Depends(deps.get_sample_word_store),
) -> SampleWordListResponse:
    return SampleWordListResponse(words=store.list_words())


@router.post(
    "",
    response_model=SampleWordResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def create_sample_word(
    payload: SampleWordCreate,
    store: SampleWordStore = Depends(deps.get_sample_word_store),
) -> SampleWordResponse:
    return SampleWordResponse(word=store.create(payload))


@router.patch("/{word_id}", response_model=SampleWordResponse, response_model_exclude_none=True)
def update_sample_word(
    word_id: str,
    payload: SampleWordUpdate,
    store: SampleWordStore = Depends(deps.get_sample_word_store),
) -> SampleWordResponse:
    return SampleWordResponse(word=store.update(word_id, payload))


@router.delete("/{word_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_sample_word(
    word_id: str,
    store: SampleWordStore = Depends(deps.get_sample_word_store),
) -> Response:
    store.delete(word_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
