"""Load ``KEY=VALUE`` pairs from a dotenv file into the environment."""

from .env import load_env, load_env_async

__all__ = ["load_env", "load_env_async"]
