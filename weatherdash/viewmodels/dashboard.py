from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import AbstractContextManager, nullcontext

from weatherdash.api.errors import (
    CapabilityUnavailableError,
    DataUnavailableError,
    NotFoundError,
    ResolutionError,
)
from weatherdash.api.geocoding import resolve_location
from weatherdash.api.geolocation import locate
from weatherdash.api.models import Location, UnitSystem, WeatherReport
from weatherdash.api.weather_fetch import fetch_weather
from weatherdash.config import DEFAULT_LOCATION

logger = logging.getLogger("weatherdash")

MSG_GEOLOCATION_FAILED = "Unable to retrieve your location. Please try again or search for a city."
MSG_NOT_FOUND = "Could not find the specified location. Please try again."
MSG_FETCH_FAILED = "Unable to fetch weather data. Please try again."


class DashboardController:
    """
    Kytkee käyttäjän toiminnot (haku, paikannus, yksikkövalinta) hakuputkeen.

    Istunnon tila on kahdessa kentässä: ``unit`` ja ``location``. ``location``
    päivitetään vasta kun sen säähaku onnistui, joten se vastaa aina
    ``report``-kentän dataa.
    """

    def __init__(
        self,
        resolver: Callable[[str], Location] = resolve_location,
        geolocator: Callable[[], Location] = locate,
        fetcher: Callable[[Location, UnitSystem], WeatherReport] = fetch_weather,
        loading: Callable[[], AbstractContextManager] = nullcontext,
        notify: Callable[[str], None] | None = None,
        default_location: str = DEFAULT_LOCATION,
    ) -> None:
        self._resolver = resolver
        self._geolocator = geolocator
        self._fetcher = fetcher
        self._loading = loading
        self._notify = notify or (lambda message: None)
        self.default_location = default_location

        self.unit: UnitSystem = UnitSystem.METRIC
        self.location: Location | None = None
        self.report: WeatherReport | None = None
        self.started = False

    # --- käyttäjän toiminnot ----------------------------------------------------
    def start(self) -> None:
        """Ensimmäinen ajo: yritetään paikantaa, muuten oletuskaupunki."""
        if self.started:
            return
        self.started = True
        logger.info("Dashboard session started")
        self.geolocate()

    def geolocate(self) -> bool:
        with self._loading():
            try:
                location = self._geolocator()
            except CapabilityUnavailableError as err:
                logger.warning("Geolocation unavailable: %s", err)
                location = None
            if location is not None:
                return self._load(location)

        self._notify(MSG_GEOLOCATION_FAILED)
        return self.search(self.default_location)

    def search(self, query: str) -> bool:
        """Hakee paikan nimellä. Palauttaa True, jos sää saatiin näytettäväksi."""
        query = (query or "").strip()
        if not query:
            return False

        with self._loading():
            try:
                location = self._resolver(query)
            except (NotFoundError, ResolutionError) as err:
                logger.warning("Location lookup failed for %r: %s", query, err)
                self._notify(MSG_NOT_FOUND)
                return False
            return self._load(location)

    def set_unit(self, unit: UnitSystem) -> bool:
        """
        Vaihtaa yksikön. Palauttaa False, jos yksikkö oli jo valittuna.

        Jos paikka tiedetään, sää haetaan uudelleen täsmälleen kerran uusilla yksiköillä.
        """
        if unit == self.unit:
            return False
        self.unit = unit
        logger.info("Unit switched to %s", unit.value)
        if self.location is not None:
            with self._loading():
                self._load(self.location)
        return True

    def refresh(self) -> bool:
        if self.location is None:
            return False
        with self._loading():
            return self._load(self.location)

    # --- sisäiset ---------------------------------------------------------------
    def _load(self, location: Location) -> bool:
        try:
            report = self._fetcher(location, self.unit)
        except DataUnavailableError as err:
            logger.warning("Weather fetch failed for %s: %s", location.label, err)
            self._notify(MSG_FETCH_FAILED)
            return False

        self.location = location
        self.report = report
        return True
