# main.py
import logging
from src.bot import WalletBot
from src.config import Config, setup_logging

def main():
    # Setup logging
    setup_logging()
    logger = logging.getLogger(__name__)
    
    try:
        Config.validate()
        bot = WalletBot()
        logger.info("Starting Wallet Bot...")
        bot.run()
    except Exception as e:
        logger.error(f"Error starting bot: {e}", exc_info=True)
        raise

if __name__ == "__main__":
    main()
