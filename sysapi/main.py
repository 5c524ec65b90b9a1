"""ASGI entrypoint: uvicorn sysapi.main:app"""

from dotenv import load_dotenv

load_dotenv()

from sysapi.factory import create_app

app = create_app()
