"""
Run the SafeNetID portal.

`flask --app app run` picks up `app` below; `python app.py` starts the
development server on $PORT (3000 by default).
"""

import os
from safenetid import create_app

app = create_app()

if __name__ == '__main__':
    app.run(debug=True, host='0.0.0.0', port=int(os.environ.get('PORT', 3000)))
