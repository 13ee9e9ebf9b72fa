DEFAULT_CHILDREN_KEY = "sub_categories"
DEFAULT_ID_KEY = "id"
TRACE_LOGGER_NAME = "treepath.trace"
