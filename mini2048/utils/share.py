"""Build the summary message a player can share once the game is over."""


def share_message(score: int, url: str | None = None) -> str:
    """
    Format the shareable summary of a finished game.

    Parameters
    ----------
    score : int
        The final score of the session.
    url : str, optional
        Link appended to the message, by default nothing is appended.

    Returns
    -------
    str
        The summary message.

    Example
    -------
    >>> share_message(1024, "https://example.org/2048")
    'I scored 1024 points in 2048! https://example.org/2048'
    """
    message = f'I scored {score} points in 2048!'
    if url:
        return f'{message} {url}'
    return message
