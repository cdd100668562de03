"""Environment variable configuration for Betfair API access.

Create a .env file in the project root with your credentials:

Every request needs an application key:
    BF_APP_KEY=...              # Delayed or live app key from the developer portal

Then either an existing session:
    BF_SESSION_TOKEN=...        # Token from a previous login

Or account credentials for interactive login:
    BF_USERNAME=...
    BF_PASSWORD=...

Optional:
    BF_LOCALE=en                # Language of names in results
"""

import os

from dotenv import load_dotenv

load_dotenv()

BF_APP_KEY = os.getenv("BF_APP_KEY")
BF_SESSION_TOKEN = os.getenv("BF_SESSION_TOKEN")

# Interactive login (used when no session token is set)
BF_USERNAME = os.getenv("BF_USERNAME")
BF_PASSWORD = os.getenv("BF_PASSWORD")

BF_LOCALE = os.getenv("BF_LOCALE", "")
