__title__ = "mplus-source"
__description__ = "MANGA Plus content source: title search, chapter lists and page decryption"
__version__ = "1.0.0"
__license__ = "GPLv3"
__intro__ = r"""
                 _
  _ __ ___  _ __ | |_   _ ___       ___  ___  _   _ _ __ ___ ___
 | '_ ` _ \| '_ \| | | | / __|_____/ __|/ _ \| | | | '__/ __/ _ \
 | | | | | | |_) | | |_| \__ \_____\__ \ (_) | |_| | | | (_|  __/
 |_| |_| |_| .__/|_|\__,_|___/     |___/\___/ \__,_|_|  \___\___|
           |_|
"""
