from .fspl import (
	fspl_db,
	inverse_square_power_mw,
	db_to_linear,
	mw_to_dbm,
	dbm_to_mw,
)
from .model_params import (
	SignalModelParams,
	DEFAULT_PARAMS,
	parse_params_text,
	load_params_from_text_file,
)
from .signal_model import (
	NO_SIGNAL_DBM,
	SignalReading,
	compute_reading,
	compute_curve,
	no_signal_reading,
)
from .quality import QualityBand, QUALITY_BANDS, signal_quality, color_for_strength
from .formatting import (
	CalculationStep,
	format_scientific,
	format_power_dbm,
	calculation_steps,
	summary_rows,
)
from .curve import (
	CURVE_COLUMNS,
	readings_to_table,
	print_table,
	save_curve_csv,
	curve_arrays,
)
from .plots import signal_curve_figure, plot_signal_curve

__all__ = [
	"fspl_db",
	"inverse_square_power_mw",
	"db_to_linear",
	"mw_to_dbm",
	"dbm_to_mw",
	"SignalModelParams",
	"DEFAULT_PARAMS",
	"parse_params_text",
	"load_params_from_text_file",
	"NO_SIGNAL_DBM",
	"SignalReading",
	"compute_reading",
	"compute_curve",
	"no_signal_reading",
	"QualityBand",
	"QUALITY_BANDS",
	"signal_quality",
	"color_for_strength",
	"CalculationStep",
	"format_scientific",
	"format_power_dbm",
	"calculation_steps",
	"summary_rows",
	"CURVE_COLUMNS",
	"readings_to_table",
	"print_table",
	"save_curve_csv",
	"curve_arrays",
	"signal_curve_figure",
	"plot_signal_curve",
]
