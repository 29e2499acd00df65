"""All magic values live here — no inline literals anywhere else."""

# Recognition service wire format
SPEECH_ENDPOINT = "https://www.google.com/speech-api/v2/recognize"
SPEECH_OUTPUT_FORMAT = "json"
SPEECH_CONTENT_TYPE = "audio/l16; rate=16000;"

# The service sometimes streams an empty result object ahead of the real one.
EMPTY_RESULT_PREFIX = '{"result":[]}\n'

# Time budgets (seconds)
DEFAULT_LISTEN_TIMEOUT: float = 30.0
DEFAULT_REQUEST_TIMEOUT: float = 30.0

# Log / user-facing messages
MSG_LISTEN_START = "Listening in %d languages (deadline %.1fs)"
MSG_ATTEMPT_FAILED = "%s attempt failed: %s"
MSG_ATTEMPT_CRASHED = "%s attempt raised unexpectedly"
MSG_NO_SPEECH = "%s: no speech detected"
MSG_HYPOTHESIS = "%s: %r (%.3f)"
MSG_DEADLINE = "Deadline reached with %d of %d attempts reported"
MSG_BEST = "✓ Best: %s %r (%.3f)"
MSG_NO_RESULT = "No response"
MSG_EMPTY_AUDIO = "No audio data provided for recognition."
MSG_TRANSPORT_STATUS = "Recognition request failed (%d): %s"
MSG_TRANSPORT_UNREACHABLE = "Recognition request could not reach the server: %s"
MSG_TRANSPORT_UNDECODABLE = "Recognition response is not valid UTF-8"
MSG_DECODE_JSON = "Malformed recognition response: %s"
MSG_DECODE_SCHEMA = "Unexpected recognition response shape: %s"
MSG_UNKNOWN_LANGUAGE = "Unsupported language code: %s"
MSG_READ_AUDIO_FAILED = "Could not read audio file %s: %s"
