class AbsentMarkerError(ValueError):
    pass
