"""Development entry point for the Firehawk contact API."""

import os
from firehawk import create_app

app = create_app()

if __name__ == '__main__':
    app.run(debug=app.config['DEBUG'], host='0.0.0.0', port=int(os.environ.get('PORT', 5000)))
