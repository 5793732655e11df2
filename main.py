import logging
from fastapi import FastAPI
from app.api.v1 import auth, user
from app.core.config import LOG_LEVEL
from app.core.errors import register_error_handlers
from app.db.init_db import init_db
from app.db.session import engine
from app.routers import post
from app.routers import comment
from app.routers import like
from app.routers import content

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

init_db(engine)

app = FastAPI()

register_error_handlers(app)

app.include_router(auth.router, prefix="/api", tags=["Auth"])
app.include_router(user.router, prefix="/api/users", tags=["Users"])
app.include_router(post.router, prefix="/api/posts", tags=["Posts"])
app.include_router(comment.router, prefix="/api/posts", tags=["Comments"])
app.include_router(like.router, prefix="/api/posts", tags=["Likes"])
app.include_router(content.router, prefix="/api/contents", tags=["Contents"])
