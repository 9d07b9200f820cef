# UI.py
""""PySide6 user interface for the Decimal Text Calculator.

Structure
---------
- Calculator UI: scratchpad window with an input box for (noisy) text, the
  result line, a skip marker and an optional expression tree view
- Settings UI: modal dialog for user preferences

Responsibilities (Calculator)
-----------------------------
- Dispatch the input text to MathEngine in a worker thread
- Render results, the skipped prefix and MathEngine errors as dialogs
- Clipboard integration (copy/paste) and optional auto-evaluate after paste


Threading Note
--------------
Evaluation runs off the UI thread in Worker(QObject). Results (or errors)
are emitted via a Qt signal and handled back in the UI.
"""""

from PySide6 import QtWidgets, QtGui
from PySide6.QtCore import Qt, QObject, Signal
import sys
import threading
from pynput.keyboard import Controller
import pyperclip
from . import error as E  # Imports error.py as a module
from . import config_manager as config_manager  # Imports config_manager.py as a module
from . import MathEngine as MathEngine  # Imports MathEngine.py as a module


def is_shift_pressed():
    """""

    Small and simple check, whether shift is pressed or not.
    Used to switch the clipboard button from paste to copy.

    """""

    keyboard_controller = Controller()
    return keyboard_controller.shift_pressed


def skip_marker(text, skip):
    """Caret line pointing at the first character that was calculated."""
    first_line = text.split("\n", 1)[0]
    if skip > len(first_line):
        return f"(skipped {skip} characters)"
    return first_line + "\n" + " " * skip + "^"


class Worker(QObject):
    """""

    Runs in a seperate thread, hands the text to MathEngine.calculate and
    emits a Signal when the calculation is done / failed.

    """""

    job_finished = Signal(object, str)

    def __init__(self, problem):
        super().__init__()
        self.data = problem

    def run_Calc(self):

        try:
            result = MathEngine.calculate(self.data)
            self.job_finished.emit(result, self.data)

        except E.MathError as e:
            # Known error (e.g. nothing calculable in the text)
            self.job_finished.emit(e, self.data)

        except Exception as e:
            # Unexpected crash we didn't plan for (e.g. a bug in the code)
            critical_error = E.MathError(
                message=f"Unexpected crash: {e}",
                code="9999",
                equation=self.data
            )
            self.job_finished.emit(critical_error, self.data)


class SettingsDialog(QtWidgets.QDialog):
    """""

    Settings window. Boolean settings become checkboxes, integer settings
    become input fields. The descriptions come from ui_strings.json.

    """""

    settings_saved = Signal()  # Signal to tell the main window to update

    def __init__(self, parent=None):
        super().__init__(parent)
        self.widgets = {}

        self.setWindowTitle("Calculator Settings")
        self.setMinimumSize(320, 220)

        main_layout = QtWidgets.QVBoxLayout(self)

        self.setting_value_list = config_manager.load_setting_value("all")
        self.setting_description_list = config_manager.load_setting_description("all")

        for key_value, value in self.setting_value_list.items():
            description = self.setting_description_list.get(key_value, key_value)

            if isinstance(value, bool):
                checkbox = QtWidgets.QCheckBox(description)
                checkbox.setChecked(value)
                main_layout.addWidget(checkbox)
                self.widgets[key_value] = checkbox

            elif isinstance(value, int):
                row_h_layout = QtWidgets.QHBoxLayout()
                main_layout.addLayout(row_h_layout)
                label = QtWidgets.QLabel(description + " (min. 2):")
                input_field = QtWidgets.QLineEdit()
                input_field.setPlaceholderText(str(value))  # Show current value as placeholder

                row_h_layout.addWidget(label)
                row_h_layout.addWidget(input_field)
                row_h_layout.setStretch(1, 1)
                self.widgets[key_value] = input_field

        button_box = QtWidgets.QDialogButtonBox(QtWidgets.QDialogButtonBox.Ok | QtWidgets.QDialogButtonBox.Cancel)
        main_layout.addWidget(button_box)
        main_layout.addStretch(1)

        button_box.accepted.connect(lambda: self.save_settings(self.setting_value_list))
        button_box.rejected.connect(self.reject)

        self.update_darkmode()

    def save_settings(self, setting_value_list):
        for key_value, widget in self.widgets.items():

            if isinstance(widget, QtWidgets.QCheckBox):
                setting_value_list[key_value] = widget.isChecked()

            elif isinstance(widget, QtWidgets.QLineEdit):
                new_value_str = widget.text().strip()

                # If user left it blank, keep the old value
                if new_value_str == "":
                    continue

                try:
                    new_value_int = int(new_value_str)
                    if new_value_int < 2:
                        raise ValueError(f"'{new_value_int}' is too small. Minimum is 2.")
                except ValueError as e:
                    QtWidgets.QMessageBox.critical(self, "Invalid Input:",
                                                   f"{E.ERROR_MESSAGES['4502']}{key_value}\n\n{e}\n\nPlease correct your input.")
                    return  # Stop saving!

                setting_value_list[key_value] = new_value_int

        saved_settings = config_manager.save_setting(setting_value_list)

        if saved_settings != {}:
            self.settings_saved.emit()
            self.accept()
        else:
            QtWidgets.QMessageBox.critical(self, "Error", E.ERROR_MESSAGES["4501"] + "config.json")

    def update_darkmode(self):
        if self.setting_value_list["darkmode"] == True:
            self.setStyleSheet("""
                        QDialog {background-color: #121212;}
                        QLabel {color: white;}
                        QCheckBox {color: white;}
                        QLineEdit {background-color: #444444;color: white;border: 1px solid #666666;}
                        QDialogButtonBox QPushButton {background-color: #666666;color: white;}""")
        else:
            self.setStyleSheet("")


class CalculatorPrototype(QtWidgets.QWidget):

    def __init__(self):
        super().__init__()

        self.setting_value_list = config_manager.load_setting_value("all")

        self.calculator_result = ""  # Last rendered result, what the copy button copies
        self.thread_active = False  # Is a calculation running?

        self.setWindowTitle("Decimal Calculator")
        self.resize(480, 420)
        main_v_layout = QtWidgets.QVBoxLayout(self)

        monospace = QtGui.QFontDatabase.systemFont(QtGui.QFontDatabase.SystemFont.FixedFont)

        # --- Input: free text, history lines, anything pasted ---
        self.input_box = QtWidgets.QPlainTextEdit()
        self.input_box.setPlaceholderText("Paste or type text, e.g. 'total: 0.1 + 0.2 ='")
        self.input_box.setFont(monospace)
        main_v_layout.addWidget(self.input_box, 2)

        # --- Buttons ---
        button_row = QtWidgets.QHBoxLayout()
        main_v_layout.addLayout(button_row)
        self.button_objects = {}
        for text, handler in (('⚙', self.open_settings), ('📋', self.handle_clipboard),
                              ('C', self.clear), ('⏎', self.start_calculation)):
            button = QtWidgets.QPushButton(text)
            button.clicked.connect(handler)
            button_row.addWidget(button)
            self.button_objects[text] = button

        # --- Result ---
        self.display = QtWidgets.QLineEdit("0")
        self.display.setAlignment(Qt.AlignmentFlag.AlignRight)
        self.display.setReadOnly(True)
        font = self.display.font()
        font.setPointSize(24)
        self.display.setFont(font)
        main_v_layout.addWidget(self.display)

        self.skip_label = QtWidgets.QLabel("")
        self.skip_label.setFont(monospace)
        main_v_layout.addWidget(self.skip_label)

        # --- Expression tree (diagnostic) ---
        self.tree_view = QtWidgets.QPlainTextEdit()
        self.tree_view.setReadOnly(True)
        self.tree_view.setFont(monospace)
        main_v_layout.addWidget(self.tree_view, 2)

        self.update_tree_visibility()
        self.update_darkmode()
        self.update_return_button()

    # --- Key Event Handlers ---
    def keyPressEvent(self, event):
        # Ctrl+Enter calculates, like the ⏎ button
        if event.key() in (Qt.Key.Key_Return, Qt.Key.Key_Enter) and event.modifiers() & Qt.KeyboardModifier.ControlModifier:
            self.start_calculation()
            return
        super().keyPressEvent(event)

    def clear(self):
        self.input_box.setPlainText("")
        self.display.setText("0")
        self.skip_label.setText("")
        self.tree_view.setPlainText("")

    def handle_clipboard(self):
        # Shift held → copy the result, otherwise paste into the input
        if is_shift_pressed():
            pyperclip.copy(self.calculator_result)
            return

        clipboard_text = QtWidgets.QApplication.clipboard().text()
        if not clipboard_text:
            return

        self.input_box.insertPlainText(clipboard_text)

        if self.setting_value_list["after_paste_enter"] == True:
            self.start_calculation()

    def start_calculation(self):
        if self.thread_active:
            print(E.ERROR_MESSAGES["4002"])
            return

        problem = self.input_box.toPlainText()
        self.thread_active = True
        self.update_return_button()
        self.display.setText("...")
        QtWidgets.QApplication.processEvents()  # Force UI update *before* starting thread

        worker_instance = Worker(problem)
        worker_instance.job_finished.connect(self.Calc_result)
        my_thread = threading.Thread(target=worker_instance.run_Calc)
        my_thread.start()

    def Calc_result(self, result, equation):
        self.thread_active = False
        self.update_return_button()

        if isinstance(result, E.MathError):
            error_box = QtWidgets.QMessageBox(self)
            error_box.setIcon(QtWidgets.QMessageBox.Critical)
            error_box.setWindowTitle("Calculation error")
            error_box.setText(f"Error {result.code}: {E.ERROR_MESSAGES.get(result.code, 'Unknown error')}")
            error_box.setInformativeText(f"Equation: {result.equation}")
            error_box.setDetailedText(result.message)
            error_box.setStyleSheet(self.get_message_box_stylesheet())
            error_box.exec()
            self.display.setText("0")
            self.skip_label.setText("")
            self.tree_view.setPlainText("")
            return

        self.calculator_result = result.result
        self.display.setText(f"= {result.result}")
        self.skip_label.setText(skip_marker(equation, result.skip) if result.skip else "")

        if self.setting_value_list["show_tree"] == True:
            self.tree_view.setPlainText("\n".join(result.ast.get_print_tree()))

        if self.setting_value_list["copy_result"] == True:
            pyperclip.copy(result.result)

    def update_return_button(self):
        return_button = self.button_objects['⏎']
        # Red "X" while a calculation is running, blue "⏎" when idle
        if self.thread_active == True:
            return_button.setStyleSheet("background-color: #FF0000; color: white; font-weight: bold;")
            return_button.setText("X")
        else:
            return_button.setStyleSheet("background-color: #007bff; color: white; font-weight: bold;")
            return_button.setText("⏎")
        return_button.update()

    def update_tree_visibility(self):
        self.tree_view.setVisible(self.setting_value_list["show_tree"] == True)

    def update_darkmode(self):
        if self.setting_value_list["darkmode"] == True:
            for text, button in self.button_objects.items():
                if text != '⏎':
                    button.setStyleSheet("background-color: #121212; color: white; font-weight: bold;")
            self.setStyleSheet("background-color: #121212; color: white;")
            self.display.setStyleSheet("background-color: #121212; color: white; font-weight: bold;")
        else:
            for text, button in self.button_objects.items():
                if text != '⏎':
                    button.setStyleSheet("font-weight: normal;")
            self.setStyleSheet("")
            self.display.setStyleSheet("font-weight: bold;")
        self.update_return_button()

    def open_settings(self):
        settings_dialog = SettingsDialog(self)
        settings_dialog.exec()  # modal

        # Reload settings after the dialog closes
        self.setting_value_list = config_manager.load_setting_value("all")
        self.update_darkmode()
        self.update_tree_visibility()

    def get_message_box_stylesheet(self):
        if self.setting_value_list["darkmode"] == True:
            return """
                QMessageBox {
                    background-color: #121212;
                    color: white;
                }
                QLabel {
                    color: white;
                }
                QPushButton {
                    background-color: #2e2e2e;
                    color: white;
                    border: 1px solid #444444;
                    padding: 5px 15px;
                }
            """
        else:
            return ""


def main():
    app = QtWidgets.QApplication(sys.argv)
    window = CalculatorPrototype()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
