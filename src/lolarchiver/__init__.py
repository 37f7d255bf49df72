"""lolarchiver -- command-line client for the LoLArchiver lookup API.

Every sub-command maps to exactly one authenticated ``POST`` against the
remote service. The package is split into a small number of layers:

    catalog: Static descriptors and request builders, one per endpoint.
    client: Blocking HTTP client plus the elapsed-time indicator.
    interpreter: Status-code guidance for the phone and database lookups.
    config: Per-user credential store and settings resolution.
    commands: Typer sub-applications, one per platform group.
    app: Root Typer application and console-script entry point.

Typical workflow::

    lolarchiver config set-api-key YOUR_API_KEY
    lolarchiver credits
    lolarchiver database "jane doe" --exact
"""

__version__ = "1.0.0"
