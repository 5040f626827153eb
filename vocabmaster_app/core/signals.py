"""
Central Signal Registry for Event-Driven Architecture.

Uses blinker so that modules can react to each other's events without
importing one another.

Usage:
    # Publisher (sender)
    from vocabmaster_app.core.signals import quiz_result_saved
    quiz_result_saved.send(current_app._get_current_object(), result=result)

    # Subscriber (receiver) - in module's events.py
    @quiz_result_saved.connect
    def on_quiz_result_saved(sender, **kwargs):
        ...
"""
from blinker import Namespace

learning_signals = Namespace()

# Signal: Fired after a QuizResult row has been committed
# Payload: result (QuizResult)
quiz_result_saved = learning_signals.signal('quiz_result_saved')
