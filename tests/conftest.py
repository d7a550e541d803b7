import pytest

# Wikipedia's classic program; prints "Hello World!\n"
HELLO_WORLD = (
    "++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]>>."
    ">---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++."
)


@pytest.fixture
def hello_world():
    return HELLO_WORLD
