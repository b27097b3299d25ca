"""
Entry point for the TAPP mock API server
"""

import logging
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from tapp.config.settings import PORT, LOG_LEVEL
from tapp.app import app

# Configure logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

if __name__ == "__main__":
    import uvicorn
    logger.info(f"Starting TAPP mock API on port {PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
