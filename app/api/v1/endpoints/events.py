"""
Event endpoints.

CRUD for events.
"""

from fastapi import APIRouter, Depends, status

from app.api.dependencies import EventId, get_event_service
from app.schemas.event import EventCreate, EventResponse, EventUpdate
from app.services.event_service import EventService

router = APIRouter()


@router.get("", summary="List all events.", response_model=list[EventResponse], )
def list_events(service: EventService = Depends(get_event_service)):
    return service.get_all()


@router.get("/{event_id}", summary="Get an event.", response_model=EventResponse, )
def get_event(event_id: EventId, service: EventService = Depends(get_event_service)):
    return service.get(event_id)


@router.post("", summary="Create an event.", response_model=EventResponse, status_code=status.HTTP_201_CREATED, )
def create_event(data: EventCreate, service: EventService = Depends(get_event_service)):
    return service.create(data)


@router.put("/{event_id}", summary="Update an event.", response_model=EventResponse, )
@router.patch("/{event_id}", summary="Partially update an event.", response_model=EventResponse, )
def update_event(event_id: EventId, data: EventUpdate, service: EventService = Depends(get_event_service)):
    return service.update(event_id, data)


@router.delete("/{event_id}", summary="Delete an event.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_event(event_id: EventId, service: EventService = Depends(get_event_service)):
    service.delete(event_id)
