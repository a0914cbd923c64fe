"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and pass payloads to services
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.caching import cache_event_list, get_cached_event_list
from events.domain import DomainError, ErrorCode, EventValidationError
from events.handlers.serializers import ErrorDetailSerializer, EventSerializer
from events.services.event_service import EventService
from events.stores.django_store import DjangoEventStore

_STATUS_BY_CODE = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.VALIDATION_FAILED: status.HTTP_422_UNPROCESSABLE_ENTITY,
}


def get_event_service() -> EventService:
    return EventService(DjangoEventStore())


def error_response(error: DomainError) -> Response:
    """Translate a domain error into its HTTP response."""
    code = _STATUS_BY_CODE[error.code]
    if isinstance(error, EventValidationError):
        return Response({"message": error.message, "errors": error.errors}, status=code)
    return Response({"error": ErrorDetailSerializer(error).data}, status=code)


class EventListView(APIView):
    """Handler for GET and POST /api/events"""

    def get(self, request: Request) -> Response:
        data = get_cached_event_list()
        if data is None:
            events = get_event_service().list_events()
            data = [dict(item) for item in EventSerializer(events, many=True).data]
            cache_event_list(data)
        return Response(data)

    def post(self, request: Request) -> Response:
        try:
            event = get_event_service().create_event(request.data)
        except DomainError as exc:
            return error_response(exc)
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(APIView):
    """Handler for PUT and DELETE /api/events/{event_id}"""

    def put(self, request: Request, event_id: str) -> Response:
        try:
            event = get_event_service().update_event(event_id, request.data)
        except DomainError as exc:
            return error_response(exc)
        return Response(EventSerializer(event).data)

    def delete(self, request: Request, event_id: str) -> Response:
        try:
            get_event_service().delete_event(event_id)
        except DomainError as exc:
            return error_response(exc)
        return Response({"status": "success"})
