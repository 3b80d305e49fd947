# run.py
import uvicorn
import sys

from portfolio_api.core.logging import logger

if __name__ == "__main__":
    logger.info("Starting Photo Portfolio API...")
    try:
        uvicorn.run("portfolio_api.main:app", host="0.0.0.0", port=8000, reload=True)
    except Exception as e:
        logger.error(f"Error starting server: {str(e)}")
        sys.exit(1)
