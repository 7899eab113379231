"""Prompt asking the backend for `go doc` commands relevant to a Go file."""

COMMAND_PREFIX = "go doc"

# Command grammar shown to the backend. Comments after `#` are ignored by
# the extractor, so the model may echo them back safely.
USAGE_GUIDE = """Usage of [go] doc:

# Local project
go doc MyFunction      # Function docs
go doc MyType          # Type docs
go doc MyType.MyMethod # Method docs
go doc MyVar           # Variable docs
go doc MyConst         # Constant docs

# External projects (stdlib & dependencies)
go doc fmt.Sprintf                 # Stdlib function
go doc net/http.Client             # Stdlib type
go doc net/http.Client.Do          # Stdlib method
go doc go.opentelemetry.io/otel.SetMeterProvider # Dependency function
go doc go.opentelemetry.io/otel/sdk/trace.TracerProvider # Dependency type
go doc go.opentelemetry.io/otel/sdk/trace.TracerProvider.Shutdown # Dependency method
go doc go.opentelemetry.io/otel/codes.Error # Dependency constant"""


def build_lookup_prompt(file_contents: str) -> str:
    """Build the single user message sent to the backend.

    Args:
        file_contents: Full Go source, embedded verbatim

    Returns:
        Prompt requesting one `go doc` command per line and nothing else
    """
    return f"""Given the following golang code, tell me things that could be useful for the context using `{COMMAND_PREFIX} <>`.
{USAGE_GUIDE}

```
{file_contents}
```

Just give me the `{COMMAND_PREFIX}` commands, separated one in each line. Do not say anything else. Focus on external packages and avoid golang's standard library."""
