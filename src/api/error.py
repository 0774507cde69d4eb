from typing import Dict

from libs.result import Error


class ServerError(Exception):
    """Failure outside the signup flow (e.g. misconfigured backend)"""

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)

    def to_dict(self) -> Dict[str, str]:
        # Internal message stays in the logs
        return {"code": self.base_error.code, "message": "Internal server error"}
