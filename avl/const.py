INSERT = "INSERT"
REMOVE = "REMOVE"
SEARCH = "SEARCH"
SHOW = "SHOW"
DESTROY = "DESTROY"
TERMINATOR = ";"
SEPARATOR = ","
OK = "OK"
FOUND = "FOUND"
NOT_FOUND = "NOT FOUND"
EMPTY = "EMPTY"
SYNTAX_ERR = "SYNTAX ERR"
ERR = "ERR"
LOG_LEVELS = ["debug", "info", "warning", "error", "critical"]
