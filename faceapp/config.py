import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Server origin and versioned prefix; paths from faceapp.routes are appended to both
BASE_URL = os.environ.get('FACEAPP_BASE_URL', 'http://localhost:3000')
API_VERSION = os.environ.get('FACEAPP_API_VERSION', '/api')

REQUEST_TIMEOUT = float(os.environ.get('FACEAPP_REQUEST_TIMEOUT', '30'))

_default_credentials_path = Path.home() / '.faceapp' / 'credentials.db'
CREDENTIALS_URL = os.environ.get('FACEAPP_CREDENTIALS_URL', f"sqlite:///{_default_credentials_path}")
CREDENTIALS_NAMESPACE = os.environ.get('FACEAPP_CREDENTIALS_NAMESPACE', 'com.faceapp.nightlife')

LOG_LEVEL = os.environ.get('FACEAPP_LOG_LEVEL', 'INFO')
