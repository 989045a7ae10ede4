"""Domain service marker."""


class Service:
    """Marker base for domain services.

    Services orchestrate repositories, registered invitation types and the
    host facade; the invitation entities themselves stay passive.
    """
