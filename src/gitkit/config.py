import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from gitkit.shell.real import DEFAULT_SHELL_TYPE

CONFIG_FILENAME = "gitkit.toml"


@dataclass(frozen=True)
class GitkitConfig:
    """In-memory representation of `gitkit.toml`.

    Example gitkit.toml:
      # Echo every built command line to stderr
      verbose = true

      [shell]
      type = "/bin/bash"

      [env]
      # Layered over the process environment for every command
      GIT_TERMINAL_PROMPT = "0"
    """

    shell_type: str = DEFAULT_SHELL_TYPE
    env: dict[str, str] = field(default_factory=dict)
    verbose: bool = False


def load_config(config_dir: Path) -> GitkitConfig:
    """Load gitkit.toml from the given directory if present; otherwise return defaults."""
    cfg_path = config_dir / CONFIG_FILENAME
    if not cfg_path.exists():
        return GitkitConfig()

    data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    env = {str(k): str(v) for k, v in data.get("env", {}).items()}
    shell_type = data.get("shell", {}).get("type", DEFAULT_SHELL_TYPE)
    verbose = data.get("verbose", False)
    if not isinstance(verbose, bool):
        msg = f"'verbose' in {cfg_path} must be a boolean, got {verbose!r}"
        raise ValueError(msg)
    return GitkitConfig(shell_type=str(shell_type), env=env, verbose=verbose)
