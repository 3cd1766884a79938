"""
Travel document metadata.

Endpoints:
  POST   /travel-documents                   -- createTravelDocument
  GET    /users/{user_id}/travel-documents   -- getUserDocuments
  DELETE /travel-documents/{document_id}     -- deleteTravelDocument (idempotent)
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from services.api.companion import documents as documents_core
from services.api.companion.schemas import CreateTravelDocumentInput, TravelDocumentOut
from services.api.routers._deps import Envelope, envelope, get_db

router = APIRouter(tags=["travel-documents"])


def _document_payload(document) -> dict:
    return TravelDocumentOut.model_validate(document).model_dump(mode="json")


@router.post("/travel-documents", response_model=Envelope, status_code=201, name="createTravelDocument")
async def create_travel_document(
    body: CreateTravelDocumentInput,
    request: Request,
    session: AsyncSession = Depends(get_db),
) -> Envelope:
    document = await documents_core.create_travel_document(session, body)
    return envelope(request, _document_payload(document))


@router.get("/users/{user_id}/travel-documents", response_model=Envelope, name="getUserDocuments")
async def get_user_documents(
    user_id: str,
    request: Request,
    session: AsyncSession = Depends(get_db),
) -> Envelope:
    documents = await documents_core.get_user_documents(session, user_id)
    return envelope(request, [_document_payload(d) for d in documents])


@router.delete("/travel-documents/{document_id}", response_model=Envelope, name="deleteTravelDocument")
async def delete_travel_document(
    document_id: str,
    request: Request,
    session: AsyncSession = Depends(get_db),
) -> Envelope:
    await documents_core.delete_travel_document(session, document_id)
    return envelope(request)
