from expense_tracker.main import serve

serve()
