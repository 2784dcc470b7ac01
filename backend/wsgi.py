# wsgi.py
import os
from dotenv import load_dotenv; load_dotenv()

from sharer import create_app

application = create_app(os.getenv("FLASK_CONFIG", "production"))
app = application
