def test_can_import_all_protocols():
    # Import must succeed and expose the expected names
    import tools.fixtures  # noqa: F401
    import hoirun.core.interfaces as I

    assert hasattr(I, "LoggerFactoryProtocol")
    assert hasattr(I, "LoggerLikeProtocol")
    assert hasattr(I, "ToolExecutorProtocol")


def test_default_implementations_satisfy_protocols():
    import tools.fixtures  # noqa: F401
    from hoirun.core.interfaces import LoggerFactoryProtocol, LoggerLikeProtocol, ToolExecutorProtocol
    from hoirun.logging.factory import DefaultLoggerFactory
    from hoirun.tools.executor import SubprocessExecutor

    factory = DefaultLoggerFactory()
    assert isinstance(factory, LoggerFactoryProtocol)
    assert isinstance(factory.get_logger("tests"), LoggerLikeProtocol)
    assert isinstance(SubprocessExecutor(), ToolExecutorProtocol)
    assert isinstance(tools.fixtures.RecordingExecutor(), ToolExecutorProtocol)
