# Engine errors — preconditions only. Absence (no candidate, no
# alternatives) is never an error and is returned as None / [].


class PlannerError(ValueError):
    """Base class for rejected planner operations."""


class InvalidPreferencesError(PlannerError):
    pass


class InvalidSwapError(PlannerError):
    pass


class SessionNotFoundError(KeyError):
    def __init__(self, session_id: str):
        super().__init__(session_id)
        self.session_id = session_id

    def __str__(self) -> str:
        return f"Session '{self.session_id}' not found"


class BusinessNotFoundError(KeyError):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Business '{self.name}' not found"
