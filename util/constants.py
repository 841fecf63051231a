class InternalURIs:
    API = "/api"
    ANALYZE = API + "/analyze"
    HEALTH = "/healthz"
    INDEX = "/"


class FormFields:
    FILES = "files"


# Wire-level limits shared by the classifier and the refinement stage.
MAX_CONTEXT_CHARS = 200
ELLIPSIS = "..."
