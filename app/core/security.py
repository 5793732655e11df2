import uuid
from passlib.context import CryptContext
from jose import jwt, JWTError
from datetime import datetime, timedelta
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from app.core.config import SECRET_KEY, ALGORITHM, ACCESS_TOKEN_EXPIRE_DAYS
from app.schemas.token import TokenData
from app.db.session import get_db
from sqlalchemy.orm import Session
from app.db.models.user import User
from app.db.models.revoked_token import RevokedToken

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/login")


def credentials_exception():
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthenticated.",
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_token_data(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> TokenData:
    token_data = verify_token(token, credentials_exception())
    revoked = db.query(RevokedToken).filter(RevokedToken.jti == token_data.jti).first()
    if revoked is not None:
        raise credentials_exception()
    return token_data


def get_current_user(token_data: TokenData = Depends(get_token_data), db: Session = Depends(get_db)):
    user = db.query(User).filter(User.email == token_data.email).first()
    if user is None:
        raise credentials_exception()
    return user


def hash_password(password: str):
    return pwd_context.hash(password)

def verify_token(token: str, credentials_exception):
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        email: str = payload.get("sub")
        jti: str = payload.get("jti")
        if email is None or jti is None:
            raise credentials_exception
        return TokenData(email=email, jti=jti)
    except JWTError:
        raise credentials_exception


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)

def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire = datetime.utcnow() + (expires_delta or timedelta(days=ACCESS_TOKEN_EXPIRE_DAYS))
    to_encode.update({"exp": expire, "jti": uuid.uuid4().hex})
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def revoke_token(db: Session, jti: str) -> None:
    db.add(RevokedToken(jti=jti))
    db.commit()
