# Fixed values of the LMT JSON-RPC protocol

JSONRPC_VERSION = "2.0"

METHOD_SPLIT_TEXT = "LMT_split_text"
METHOD_HANDLE_JOBS = "LMT_handle_jobs"

DEFAULT_ENGINE_URL = "https://api.deepl.com/jsonrpc?client=chrome-extension,1.28.0"

# Correlation ids are drawn uniformly from this closed range
CORRELATION_ID_MIN = 60000000
CORRELATION_ID_MAX = 80000000

AUTO_LANG = "auto"
DEFAULT_TARGET_LANG = "ZH"
DETECTED_LANG_KEY = "detected"

JOB_KIND_DEFAULT = "default"
PREFERRED_NUM_BEAMS = 4

TEXT_TYPE_RICH = "richtext"
TEXT_TYPE_PLAIN = "plaintext"

RESPONSE_CODE_OK = 200
RESPONSE_METHOD = "free"

# Required request field of the inbound ``/translate`` endpoint
TEXT_PARAM = "text"
