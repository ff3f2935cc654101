"""Constants for the Google Maps web services adapter.

API Documentation:
- https://developers.google.com/maps/documentation/geocoding/requests-geocoding
- https://developers.google.com/maps/documentation/places/web-service/search-nearby
- https://developers.google.com/maps/documentation/directions/get-directions
"""

GEOCODE_PATH = "/geocode/json"
PLACES_NEARBY_PATH = "/place/nearbysearch/json"
DIRECTIONS_PATH = "/directions/json"

# Response status values
STATUS_OK = "OK"
STATUS_ZERO_RESULTS = "ZERO_RESULTS"

TRAVEL_MODE_TRANSIT = "transit"
DEPARTURE_TIME_NOW = "now"

DEFAULT_HEADERS = {
    "Accept": "application/json",
}
