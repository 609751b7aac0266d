import os
from mentorhub import create_app
from mentorhub.config import Config

# Create Flask app instance
app = create_app()

# Log the environment and allowed CORS origins
app.logger.info(f"Running in {'production' if os.getenv('FLASK_ENV') == 'production' else 'development'} mode")
app.logger.info(f"Allowed CORS Origins: {Config.CORS_ORIGINS or '*'}")

if __name__ == '__main__':
    debug_mode = Config.DEBUG
    app.logger.info(f"Debug mode is {'on' if debug_mode else 'off'}")
    app.run(debug=debug_mode, host="0.0.0.0", port=int(os.getenv("PORT", 5000)))
