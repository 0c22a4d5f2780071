from app.main import app
from mangum import Mangum

# ASGI handler for Vercel deployment; lifespan creates the tables on cold start
handler = Mangum(app, lifespan="auto")

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
