import os

from portfolio import create_app

# Portfolio site. Pages are picked by portfolio/routes.py; the secret switch
# in the navbar hides everything but the terrain.
app = create_app()

# Runs on 0.0.0.0:8080 unless PORT says otherwise. Start with: python3 run.py
if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "8080")), debug=True)
