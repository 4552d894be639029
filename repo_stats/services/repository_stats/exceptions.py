"""Exceptions for repository stats collection."""


class RepositoryStatsError(Exception):
    """Stats could not be produced, not even as an estimate."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NoTargetRepositoriesFound(Exception):
    """None of the allow-listed repositories exist in the organization."""

    def __init__(self, org_name: str):
        self.org_name = org_name
        super().__init__(f"No target repositories found in {org_name}")
