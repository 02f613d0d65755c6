import os

from dotenv import load_dotenv


def load_env() -> bool:
    """Load environment variables from env file.

    Defaults to config/local.env for local development.
    Set ENV_FILE environment variable to override.
    Variables already present in the environment win over the file.
    """
    env = os.getenv("ENV_FILE", "config/local.env")
    return load_dotenv(env)
