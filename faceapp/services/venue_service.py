"""
Venue Catalog: venues open for entry requests and their events.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from faceapp.errors import APIError
from faceapp.models.responses import EventsResponse, VenueResponse, VenuesResponse
from faceapp.models.venue import Venue
from faceapp.routes import Endpoint
from faceapp.services.observable import ObservableService


@dataclass(frozen=True)
class VenueState:
    venues: Tuple[Venue, ...] = ()
    loading: bool = False
    error: Optional[str] = None


class VenueCatalog(ObservableService):
    def __init__(self, api):
        self.api = api
        super().__init__(VenueState())

    @property
    def venues(self):
        return self._state.venues

    def fetch_venues(self):
        with self._busy():
            ticket = self._begin_fetch('venues')
            try:
                response = self.api.request(Endpoint.VENUES.route(), VenuesResponse, authenticated=True)
            except APIError as e:
                if self._is_latest_fetch('venues', ticket):
                    self._update(error=str(e))
                return
            if self._is_latest_fetch('venues', ticket):
                self._update(venues=tuple(response.venues))

    def fetch_venue(self, venue_id):
        response = self.api.request(Endpoint.VENUE.route(id=venue_id), VenueResponse, authenticated=True)
        return response.venue

    def fetch_events(self, venue_id):
        response = self.api.request(Endpoint.VENUE_EVENTS.route(id=venue_id), EventsResponse, authenticated=True)
        return list(response.events)
