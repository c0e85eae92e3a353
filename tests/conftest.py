import os

# Settings are read when core.config is first imported, before any fixture runs
os.environ.setdefault("GITHUB_TOKEN", "test_github_token")
os.environ.setdefault("BOT_NAMES", "bot,bot2")
os.environ.setdefault("GITHUB_WEBHOOK_SECRET", "test_secret")
