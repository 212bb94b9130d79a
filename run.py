# run.py
import uvicorn
import sys
import os
import logging

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Add the current directory to the Python path
sys.path.insert(0, os.path.abspath("."))

if __name__ == "__main__":
    logger.info("Starting NextUp Presentation API...")
    try:
        uvicorn.run("nextup.main:app", host="0.0.0.0", port=int(os.getenv("PORT", "8000")), reload=True)
    except Exception as e:
        logger.error(f"Error starting server: {str(e)}")
        sys.exit(1)
