from enum import Enum


class Stage(Enum):
    """Stages of a single weather lookup request.

    A request moves forward through these stages in order and either
    reaches RESPONDED or leaves early with an error raised from the stage
    it was in.
    """

    AWAITING_CITY_PARAM = "awaiting_city_param"
    RESOLVING_LOCATION = "resolving_location"
    FETCHING_WEATHER = "fetching_weather"
    NORMALIZING = "normalizing"
    RESPONDED = "responded"
