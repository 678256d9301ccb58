"""
Purpose: Flask server exposing the navigation engine.
Dependencies: flask, server/routes/map.py.
Ext Hooks: Add more blueprints (ownership, inventory).
"""

from flask import Flask

from server.routes.map import bp as map_bp


def create_app():
    app = Flask(__name__)
    app.register_blueprint(map_bp)
    return app


app = create_app()

if __name__ == "__main__":
    from server.setup_logging import setup_logging

    setup_logging()
    app.run(debug=True)
