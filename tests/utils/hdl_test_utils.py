import os
import inspect
import glob
from myhdl import *


def run_simulation(
    bench_function,
    *args,
    dut_name=None,
    vcd_output=False,
    duration=None,
    **kwargs,
):
    """
    Test runner for MyHDL test benches with optional VCD generation.
    Args:
        bench_function: @block function returning the bench (DUT plus stimulus)
        dut_name: Optional name to use for the bench in the VCD filename
        vcd_output: Enable or disable VCD generation (default: False)
        duration: Optional simulation duration
        *args, **kwargs: Arguments to pass to bench_function
    Returns:
        The bench instance after simulation
    """
    bench_inst = bench_function(*args, **kwargs)

    # Handle VCD tracing if enabled
    if vcd_output:
        # Get the calling test name
        frame = inspect.currentframe().f_back
        caller_function = frame.f_code.co_name

        # Use provided DUT name or function name
        if dut_name is None:
            dut_name = bench_function.__name__
            # Remove 'create_' prefix if it exists
            if dut_name.startswith("create_"):
                dut_name = dut_name[7:]

        # Determine component name from the class name
        caller_self = frame.f_locals.get("self")
        component_name = (
            caller_self.__class__.__name__.replace("Test", "").lower()
            if caller_self is not None
            else "bench"
        )

        # Create component-specific directory
        component_dir = os.path.join("vcd", component_name)
        os.makedirs(component_dir, exist_ok=True)

        # Clean up old VCD files with the same name
        vcd_name = f"{dut_name}_{caller_function}"
        vcd_pattern = os.path.join(component_dir, f"{vcd_name}*.vcd")
        for old_file in glob.glob(vcd_pattern):
            os.remove(old_file)

        bench_inst.config_sim(trace=True, directory=component_dir, filename=vcd_name)

    # Run with optional duration
    if duration is not None:
        bench_inst.run_sim(duration=duration, quiet=1)
    else:
        bench_inst.run_sim(quiet=1)
    bench_inst.quit_sim()

    # Report VCD file creation if enabled
    if vcd_output:
        new_files = glob.glob(vcd_pattern)
        if new_files:
            print(f"\nCreated VCD file: {new_files[0]}")

    return bench_inst
