import logging

LOGGER_NAME = "wonderland"

def setup_logger(level: str = "INFO"):
    """로거 설정"""

    # 로거 생성
    logger = logging.getLogger(LOGGER_NAME)
    log_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(log_level)

    # 이미 핸들러가 있으면 레벨만 맞추고 중복 방지
    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(log_level)
        return logger

    # 콘솔 핸들러 생성
    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)

    # 포맷터 설정
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    console_handler.setFormatter(formatter)

    # 핸들러 추가
    logger.addHandler(console_handler)

    return logger

# 전역 로거 인스턴스 (레벨은 create_app에서 설정값으로 다시 맞춤)
logger = setup_logger()
