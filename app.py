import os
from waitress import serve
from miniapp import create_app

app = create_app()

if __name__ == '__main__':
    host = app.config['HOST']
    port = app.config['PORT']
    debug = os.getenv('DEBUG', 'false').lower() == 'true'
    app.logger.info(f"Server running on port {port}")
    app.logger.info(f"Open your Mini App URL to access: http://localhost:{port}")
    if debug:
        app.run(host=host, port=port, debug=True)
    else:
        serve(app, host=host, port=port)
