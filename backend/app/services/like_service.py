"""좋아요 토글 공용 서비스입니다. 좋아요 행의 존재 여부로 집합 멤버십을 표현합니다."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session


def toggle(db: Session, like_model, **key) -> bool:
    """``key``로 식별되는 좋아요 행을 토글하고, 토글 후 좋아요 상태를 반환합니다.

    읽기-수정-쓰기 대신 단일 DELETE/INSERT 문으로 처리하므로 서로 다른 사용자의
    동시 토글은 서로의 결과를 덮어쓰지 않습니다.
    """
    removed = db.query(like_model).filter_by(**key).delete(synchronize_session=False)
    if removed:
        db.commit()
        return False

    db.add(like_model(**key))
    try:
        db.commit()
    except IntegrityError:
        # 같은 사용자의 동시 토글이 먼저 행을 추가했다면 이번 호출은 취소로 처리한다.
        db.rollback()
        db.query(like_model).filter_by(**key).delete(synchronize_session=False)
        db.commit()
        return False
    return True
